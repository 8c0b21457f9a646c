"""Application configuration management."""

import os
from typing import Literal, Optional
from dotenv import load_dotenv

load_dotenv()

TRANSPORTS = ["stdio", "sse", "streamable-http"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Config:
    """Application configuration with validation."""

    # Transport configuration
    TRANSPORT: Literal["stdio", "sse", "streamable-http"] = os.getenv("TRANSPORT", "stdio")

    # HTTP transport settings (ignored for stdio)
    HOST: str = os.getenv("HOST", "localhost")
    PORT: int = int(os.getenv("PORT", "8050"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: Optional[str] = os.getenv("LOG_DIR") or None
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def effective_log_level(cls) -> str:
        """Log level after applying the DEBUG override."""
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL

    @classmethod
    def validate(cls) -> None:
        """Validate all configuration values."""
        errors = []

        if cls.TRANSPORT not in TRANSPORTS:
            errors.append(f"Invalid transport: {cls.TRANSPORT}")

        if not (1024 <= cls.PORT <= 65535):
            errors.append(f"Port must be between 1024-65535, got: {cls.PORT}")

        if cls.LOG_LEVEL not in LOG_LEVELS:
            errors.append(f"Invalid log level: {cls.LOG_LEVEL}")

        if errors:
            raise ValueError("Configuration errors: " + "; ".join(errors))

    @classmethod
    def display_config(cls) -> str:
        """Return a safe string representation of configuration."""
        return f"""
Rusty MCP Server Configuration:
  Transport: {cls.TRANSPORT}
  Host: {cls.HOST}
  Port: {cls.PORT}
  Log Level: {cls.effective_log_level()}
  Log Dir: {cls.LOG_DIR or "(stderr only)"}
  Debug: {cls.DEBUG}
"""

config = Config()
