"""Errors reported back to MCP clients."""

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData


class InvalidParametersError(McpError):
    """A tool was called with parameters it cannot act on."""

    def __init__(self, message: str):
        super().__init__(ErrorData(code=INVALID_PARAMS, message=message, data=None))
        self.message = message
