from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError
from mcp import types
from pydantic import Field
from datetime import datetime
import logging
import os
import platform
import sys
import traceback
from typing import Annotated, Optional

from rusty_server import __version__
from rusty_server.config import config
from rusty_server.tools import (
    CalculatorRequest,
    CalculatorTools,
    EchoTools,
    RequestCounter,
    StatsTools,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "rusty-server"
INSTRUCTIONS = (
    "This is a minimal MCP server for testing connectivity. "
    "It provides echo and calculator tools for basic operations."
)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] %(filename)s:%(lineno)d - %(message)s"


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> Optional[str]:
    """Send logs to stderr and, when log_dir is given, to a timestamped file.

    stdout is left alone because the stdio transport owns it.

    Returns:
        The log file path, or None when logging to stderr only.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    log_file_path = None

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = os.path.join(log_dir, f"rusty_server_{timestamp}.log")
        handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    logger.info("=== Rusty MCP Server Starting ===")
    if log_file_path:
        logger.info(f"Log file: {log_file_path}")
    logger.info(f"Process ID: {os.getpid()}")
    logger.info(f"Python version: {platform.python_version()}")
    logger.debug("Environment variables:")
    for key, value in os.environ.items():
        if key.startswith("MCP"):
            logger.debug(f"  {key} = {value}")

    return log_file_path


def install_crash_hook():
    """Log uncaught exceptions with their location before the process dies."""

    def log_crash(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        frames = traceback.extract_tb(exc_traceback)
        location = f"{frames[-1].filename}:{frames[-1].lineno}" if frames else "unknown location"
        logger.error(
            f"Uncaught exception at {location}: {exc_value}",
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    sys.excepthook = log_crash
    return log_crash


def bind_low_level_server(server: FastMCP) -> None:
    """Adjust the SDK's low-level server behind a FastMCP instance.

    FastMCP takes no version argument, so the handshake would report the SDK
    version instead of ours. Its call-tool handler also turns every tool
    exception into an ``isError`` result prefixed with "Error executing tool".
    The handler installed here lets an McpError raised by a tool through, so
    the session answers with a JSON-RPC error carrying its code and message.
    """
    low_level = server._mcp_server
    low_level.version = __version__

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            results = await server.call_tool(req.params.name, req.params.arguments or {})
        except ToolError as e:
            if isinstance(e.__cause__, McpError):
                raise e.__cause__ from None
            logger.warning(f"Tool call failed: {e}")
            return types.ServerResult(
                types.CallToolResult(content=[types.TextContent(type="text", text=str(e))], isError=True)
            )

        if isinstance(results, tuple):
            content, structured = results
        else:
            content, structured = results, None
        return types.ServerResult(
            types.CallToolResult(content=list(content), structuredContent=structured, isError=False)
        )

    low_level.request_handlers[types.CallToolRequest] = handle_call_tool


def create_server() -> FastMCP:
    """Create and configure the MCP server."""
    logger.debug("Creating new Rusty MCP server instance")
    server = FastMCP(
        name=SERVER_NAME,
        instructions=INSTRUCTIONS,
        host=config.HOST,
        port=config.PORT,
    )
    bind_low_level_server(server)

    # Initialize tool handlers around one shared counter
    counter = RequestCounter()
    echo_tools = EchoTools(counter)
    calc_tools = CalculatorTools(counter)
    stats_tools = StatsTools(counter, __version__)

    @server.tool()
    def echo(
        message: Annotated[str, Field(description="The message to echo back")],
    ) -> str:
        """Echo back the provided message."""
        return echo_tools.echo(message)

    @server.tool()
    def calculator(
        operation: Annotated[str, Field(description="The operation to perform: add, subtract, multiply, divide")],
        a: Annotated[float, Field(description="The first number")],
        b: Annotated[float, Field(description="The second number")],
    ) -> str:
        """Perform basic calculator operations."""
        return calc_tools.calculate(CalculatorRequest(operation=operation, a=a, b=b))

    @server.tool()
    def get_stats() -> str:
        """Get server statistics."""
        return stats_tools.get_stats()

    return server


def main():
    """Main server entry point."""
    try:
        config.validate()
        setup_logging(config.effective_log_level(), config.LOG_DIR)
        install_crash_hook()
        logger.debug(f"Command line arguments: {sys.argv}")
        logger.debug(config.display_config())

        server = create_server()

        logger.info(f"Transport mode: {config.TRANSPORT}")
        if config.TRANSPORT != "stdio":
            logger.info(f"Listening on {config.HOST}:{config.PORT}")

        server.run(transport=config.TRANSPORT)

    except Exception as e:
        logger.error(f"Server startup failed: {e}")
        raise

    logger.info("Server stopped")

if __name__ == "__main__":
    main()
