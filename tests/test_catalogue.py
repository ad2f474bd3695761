import pytest

from home_mcp import ToolNotFoundError
from home_mcp.catalogue import CATALOGUE, build_catalogue, build_input_schema
from home_mcp.models import NoArgs

EXPECTED_TOOLS = [
    "home_open",
    "home_run_scene",
    "home_control_device",
    "home_list_shortcuts",
    "home_lights_on",
    "home_lights_off",
    "home_set_thermostat",
    "home_lock_doors",
    "home_unlock_doors",
    "home_get_status",
]


def test_catalogue_lists_tools_in_order() -> None:
    assert list(CATALOGUE.names) == EXPECTED_TOOLS
    assert len(CATALOGUE) == 10


def test_every_tool_has_description_and_object_schema() -> None:
    for tool in CATALOGUE:
        assert tool.description
        assert tool.parameters["type"] == "object"
        assert "properties" in tool.parameters
        assert "required" in tool.parameters


def test_catalogue_is_rebuilt_identically() -> None:
    assert [tool.parameters for tool in build_catalogue()] == [tool.parameters for tool in CATALOGUE]


def test_lookup() -> None:
    assert CATALOGUE.get("home_open").description == "Open the Home app"
    assert "home_open" in CATALOGUE
    assert "home_close" not in CATALOGUE

    with pytest.raises(ToolNotFoundError):
        CATALOGUE.get("home_close")


def test_tool_definitions_are_frozen() -> None:
    with pytest.raises(ValueError):
        CATALOGUE.get("home_open").name = "other"  # type: ignore[misc]


def test_no_argument_schema() -> None:
    assert build_input_schema(NoArgs) == {"type": "object", "properties": {}, "required": []}


def test_scene_schema() -> None:
    assert CATALOGUE.get("home_run_scene").parameters == {
        "type": "object",
        "properties": {
            "scene": {"type": "string", "description": "Scene name to run (e.g., 'Good Morning', 'Movie Time')"},
        },
        "required": ["scene"],
    }


def test_control_device_schema() -> None:
    schema = CATALOGUE.get("home_control_device").parameters

    assert schema["required"] == ["shortcutName"]
    assert schema["properties"]["action"] == {
        "type": "string",
        "description": "Action to perform (passed as input to the shortcut)",
    }


def test_thermostat_schema() -> None:
    schema = CATALOGUE.get("home_set_thermostat").parameters

    assert schema["required"] == ["temperature"]
    assert schema["properties"]["temperature"] == {"type": "number", "description": "Temperature to set"}
    unit = schema["properties"]["unit"]
    assert unit["type"] == "string"
    assert unit["enum"] == ["fahrenheit", "celsius"]
    assert unit["default"] == "fahrenheit"


def test_optional_room_schema() -> None:
    for name in ("home_lights_on", "home_lights_off"):
        schema = CATALOGUE.get(name).parameters
        assert schema["required"] == []
        assert schema["properties"]["room"]["type"] == "string"
        assert "default" not in schema["properties"]["room"]


def test_schemas_carry_no_metadata() -> None:
    for tool in CATALOGUE:
        text = repr(tool.parameters)
        assert "title" not in text
        assert "$defs" not in text
        assert "anyOf" not in text
        assert "additionalProperties" not in text
