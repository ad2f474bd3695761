"""Export the exception hierarchy used across argument extraction and command building."""

from .exceptions import HomeToolError, ToolValidationError, ToolNotFoundError, UnknownToolError, CommandBuildError

__all__ = ["HomeToolError", "ToolValidationError", "ToolNotFoundError", "UnknownToolError", "CommandBuildError"]
