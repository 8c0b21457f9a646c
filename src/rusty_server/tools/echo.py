"""Echo tool implementation."""

import logging

from .counter import RequestCounter

logger = logging.getLogger(__name__)

class EchoTools:
    """Echo operations for the MCP server."""

    def __init__(self, counter: RequestCounter):
        self.counter = counter

    def echo(self, message: str) -> str:
        """Echo back the provided message."""
        logger.info(f"Echo tool called with message: {message}")
        self.counter.increment()

        response = f"Echo: {message}"
        logger.debug(f"Echo response: {response}")
        return response
