"""Static catalogue of the operations offered at the protocol boundary."""

from typing import Dict, Iterator, Tuple, Type

import jsonref  # type: ignore
from pydantic import BaseModel

from ..exceptions import ToolNotFoundError
from ..logger import get_logger
from ..models import (
    ControlDeviceArgs,
    ListShortcutsArgs,
    NoArgs,
    RoomArgs,
    SceneArgs,
    ThermostatArgs,
    ToolDefinition,
)
from .schema_validator import SchemaValidator

logger = get_logger(__name__)

HOME_OPEN = "home_open"
HOME_RUN_SCENE = "home_run_scene"
HOME_CONTROL_DEVICE = "home_control_device"
HOME_LIST_SHORTCUTS = "home_list_shortcuts"
HOME_LIGHTS_ON = "home_lights_on"
HOME_LIGHTS_OFF = "home_lights_off"
HOME_SET_THERMOSTAT = "home_set_thermostat"
HOME_LOCK_DOORS = "home_lock_doors"
HOME_UNLOCK_DOORS = "home_unlock_doors"
HOME_GET_STATUS = "home_get_status"

_TOOL_SPECS: Tuple[Tuple[str, str, Type[BaseModel]], ...] = (
    (HOME_OPEN, "Open the Home app", NoArgs),
    (HOME_RUN_SCENE, "Run a HomeKit scene by name (uses Shortcuts)", SceneArgs),
    (HOME_CONTROL_DEVICE, "Control a HomeKit device (requires a Shortcut set up for the device)", ControlDeviceArgs),
    (HOME_LIST_SHORTCUTS, "List available Shortcuts that may be related to Home control", ListShortcutsArgs),
    (HOME_LIGHTS_ON, "Turn on lights (requires 'Lights On' shortcut)", RoomArgs),
    (HOME_LIGHTS_OFF, "Turn off lights (requires 'Lights Off' shortcut)", RoomArgs),
    (HOME_SET_THERMOSTAT, "Set thermostat temperature (requires 'Set Thermostat' shortcut)", ThermostatArgs),
    (HOME_LOCK_DOORS, "Lock all doors (requires 'Lock Doors' shortcut)", NoArgs),
    (HOME_UNLOCK_DOORS, "Unlock all doors (requires 'Unlock Doors' shortcut)", NoArgs),
    (HOME_GET_STATUS, "Open Home app to view device status (limited API access)", NoArgs),
)


def build_input_schema(args_model: Type[BaseModel]) -> Dict:
    """Generate the published JSON schema for an argument view.

    Args:
        args_model: The pydantic model describing the tool's arguments.

    Returns:
        A flat, reference-free object schema.

    Raises:
        ToolValidationError: If the model contains recursive references.
    """
    raw_schema = args_model.model_json_schema()
    SchemaValidator.assert_no_recursive_refs(raw_schema)

    # proxies=False ensures we get a plain dict back, not JsonRef objects
    parameters_schema = jsonref.replace_refs(raw_schema, proxies=False)

    parameters_schema = SchemaValidator.sanitize_schema(parameters_schema)
    parameters_schema.setdefault("properties", {})
    parameters_schema.setdefault("required", [])
    return parameters_schema


class ToolCatalogue:
    """Immutable, ordered collection of tool definitions."""

    def __init__(self, tools: Tuple[ToolDefinition, ...]):
        self._tools = tools
        self._by_name: Dict[str, ToolDefinition] = {tool.name: tool for tool in tools}

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(tool.name for tool in self._tools)

    def get(self, name: str) -> ToolDefinition:
        """Look up a tool by name.

        Raises:
            ToolNotFoundError: If no tool has that name.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{name}' not found in the catalogue.") from None


def build_catalogue() -> ToolCatalogue:
    tools = tuple(
        ToolDefinition(name=name, description=description, parameters=build_input_schema(model), args_model=model)
        for name, description, model in _TOOL_SPECS
    )
    logger.debug("Built tool catalogue with %d tools.", len(tools))
    return ToolCatalogue(tools)


CATALOGUE = build_catalogue()
