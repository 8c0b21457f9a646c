"""Tools module for the Rusty MCP server."""

from .counter import RequestCounter
from .echo import EchoTools
from .calculator import CalculatorTools, CalculatorRequest, Operation
from .stats import StatsTools

__all__ = ["RequestCounter", "EchoTools", "CalculatorTools", "CalculatorRequest", "Operation", "StatsTools"]
