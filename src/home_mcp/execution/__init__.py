"""External process execution."""

from .invoker import ProcessInvoker

__all__ = ["ProcessInvoker"]
