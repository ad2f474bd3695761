"""Command line construction and shell quoting."""

from .quoting import quote
from .command_line import CommandLine, Program
from .builder import CommandBuilder

__all__ = ["quote", "CommandLine", "Program", "CommandBuilder"]
