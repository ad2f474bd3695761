"""Data models shared by the dispatcher, the invoker and the protocol wiring."""

from .protocol import ToolRequest, ToolResponse, TextBlock
from .outcome import InvocationOutcome
from .tool import ToolDefinition
from .arguments import (
    ArgumentView,
    NoArgs,
    SceneArgs,
    ControlDeviceArgs,
    ListShortcutsArgs,
    RoomArgs,
    ThermostatArgs,
)

__all__ = [
    "ToolRequest",
    "ToolResponse",
    "TextBlock",
    "InvocationOutcome",
    "ToolDefinition",
    "ArgumentView",
    "NoArgs",
    "SceneArgs",
    "ControlDeviceArgs",
    "ListShortcutsArgs",
    "RoomArgs",
    "ThermostatArgs",
]
