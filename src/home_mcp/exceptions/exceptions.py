"""
Custom exception classes for the Home tool server.

This module defines a hierarchy of exceptions raised while extracting
arguments, building command lines and resolving operation names. Failures of
the external programs themselves are not exceptions; they are reported as
``InvocationOutcome`` values by the process invoker.
"""


class HomeToolError(Exception):
    """Base exception for all tool-related errors."""

    pass


class ToolValidationError(HomeToolError):
    """Raised when tool arguments or a tool schema are invalid."""

    pass


class ToolNotFoundError(HomeToolError):
    """Raised when a requested tool is not found in the catalogue."""

    pass


class UnknownToolError(HomeToolError):
    """Raised when a request names an operation the dispatcher does not handle."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class CommandBuildError(HomeToolError):
    """Raised when a program name or flag is not a plain shell token."""

    pass
