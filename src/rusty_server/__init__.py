"""Minimal MCP server exposing echo, calculator and statistics tools."""

__version__ = "0.1.0"
