"""Per-operation argument views.

Each model projects the loosely typed ``ToolRequest.arguments`` mapping onto the
fields one operation needs. Unknown keys are ignored, numbers are accepted where
text is expected, and empty optional strings count as absent.
"""

from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArgumentView(BaseModel):
    """Base class for the argument projections."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


class NoArgs(ArgumentView):
    pass


class SceneArgs(ArgumentView):
    scene: Annotated[str, Field(description="Scene name to run (e.g., 'Good Morning', 'Movie Time')")]


class ControlDeviceArgs(ArgumentView):
    shortcutName: Annotated[str, Field(description="Name of the Shortcut that controls the device")]
    action: Annotated[
        Optional[str], Field(description="Action to perform (passed as input to the shortcut)")
    ] = None

    @field_validator("action")
    @classmethod
    def _empty_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ListShortcutsArgs(ArgumentView):
    filter: Annotated[Optional[str], Field(description="Filter shortcuts by name (optional)")] = None

    @field_validator("filter")
    @classmethod
    def _empty_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class RoomArgs(ArgumentView):
    room: Annotated[
        Optional[str], Field(description="Room name (optional, e.g., 'living room', 'bedroom')")
    ] = None

    @field_validator("room")
    @classmethod
    def _empty_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None


def _plain_number(schema: Dict[str, Any]) -> None:
    schema.pop("anyOf", None)
    schema["type"] = "number"


class ThermostatArgs(ArgumentView):
    # int stays int so that 72 renders as "72", not "72.0"
    temperature: Annotated[
        Union[int, float], Field(description="Temperature to set", json_schema_extra=_plain_number)
    ]
    unit: Annotated[
        str,
        Field(
            description="Temperature unit (default: fahrenheit)",
            json_schema_extra={"enum": ["fahrenheit", "celsius"]},
        ),
    ] = "fahrenheit"

    @field_validator("unit", mode="before")
    @classmethod
    def _default_when_missing(cls, value: object) -> object:
        return "fahrenheit" if value is None or value == "" else value
