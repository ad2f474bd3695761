"""Operation catalogue and schema helpers."""

from .schema_validator import SchemaValidator
from .catalogue import (
    CATALOGUE,
    ToolCatalogue,
    build_catalogue,
    build_input_schema,
    HOME_OPEN,
    HOME_RUN_SCENE,
    HOME_CONTROL_DEVICE,
    HOME_LIST_SHORTCUTS,
    HOME_LIGHTS_ON,
    HOME_LIGHTS_OFF,
    HOME_SET_THERMOSTAT,
    HOME_LOCK_DOORS,
    HOME_UNLOCK_DOORS,
    HOME_GET_STATUS,
)

__all__ = [
    "SchemaValidator",
    "CATALOGUE",
    "ToolCatalogue",
    "build_catalogue",
    "build_input_schema",
    "HOME_OPEN",
    "HOME_RUN_SCENE",
    "HOME_CONTROL_DEVICE",
    "HOME_LIST_SHORTCUTS",
    "HOME_LIGHTS_ON",
    "HOME_LIGHTS_OFF",
    "HOME_SET_THERMOSTAT",
    "HOME_LOCK_DOORS",
    "HOME_UNLOCK_DOORS",
    "HOME_GET_STATUS",
]
