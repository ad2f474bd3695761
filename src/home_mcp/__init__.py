"""Home MCP - run Home automations through Shortcuts and AppleScript behind a tool protocol."""

from .config import HomeConfig
from .catalogue import CATALOGUE, ToolCatalogue, SchemaValidator
from .commands import CommandBuilder, CommandLine, Program, quote
from .dispatcher import ToolDispatcher
from .exceptions import HomeToolError, ToolValidationError, ToolNotFoundError, UnknownToolError, CommandBuildError
from .execution import ProcessInvoker
from .logger import get_logger, setup_logging
from .models import InvocationOutcome, TextBlock, ToolDefinition, ToolRequest, ToolResponse

__all__ = [
    "HomeConfig",
    "CATALOGUE",
    "ToolCatalogue",
    "SchemaValidator",
    "CommandBuilder",
    "CommandLine",
    "Program",
    "quote",
    "ToolDispatcher",
    "HomeToolError",
    "ToolValidationError",
    "ToolNotFoundError",
    "UnknownToolError",
    "CommandBuildError",
    "ProcessInvoker",
    "get_logger",
    "setup_logging",
    "InvocationOutcome",
    "TextBlock",
    "ToolDefinition",
    "ToolRequest",
    "ToolResponse",
]
