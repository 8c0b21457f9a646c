"""Server statistics tool."""

import logging

from .counter import RequestCounter

logger = logging.getLogger(__name__)

class StatsTools:
    """Read-only view of the server's request statistics."""

    def __init__(self, counter: RequestCounter, version: str):
        self.counter = counter
        self.version = version

    def get_stats(self) -> str:
        """Get server statistics.

        Reading the statistics is not itself counted as a request.
        """
        logger.info("Get stats tool called")
        stats = (
            "Server Statistics:\n"
            f"- Total requests processed: {self.counter.value}\n"
            f"- Server version: {self.version}\n"
            "- Uptime: running"
        )
        logger.debug(f"Stats response: {stats}")
        return stats
