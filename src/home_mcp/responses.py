"""Turn invocation outcomes into tool responses.

Three policies exist:

* hard: success text, or an error response embedding the diagnostic.
* soft: success text, or guidance on creating the missing automation. A
  missing automation is an expected state of the user's setup, so the
  guidance is not flagged as an error.
* listing: filter the automation catalogue printed by the runner.
"""

from typing import Callable, Iterable, List, Optional, Union

from .models import InvocationOutcome, ToolResponse

HOME_KEYWORDS = ("light", "home", "scene", "lock", "thermostat", "door", "room")

LIST_HEADER = "Available Shortcuts:"
NO_HOME_SHORTCUTS = (
    "No Home-related shortcuts found. Create Shortcuts in the Shortcuts app to control your Home devices."
)
LIST_FAILED = "Error listing shortcuts. Make sure Shortcuts app is available."


def hard_result(
    outcome: InvocationOutcome, success_text: str, error_text: Callable[[str], str]
) -> ToolResponse:
    if outcome.failed:
        return ToolResponse.error(error_text(outcome.diagnostic or ""))
    return ToolResponse.text(success_text)


def soft_result(outcome: InvocationOutcome, success_text: str, guidance_text: str) -> ToolResponse:
    if outcome.failed:
        return ToolResponse.text(guidance_text)
    return ToolResponse.text(success_text)


def guidance(instruction: str, voice_phrase: Optional[str] = None) -> str:
    """Join a "create a Shortcut" instruction with an equivalent Siri phrase."""
    if voice_phrase is None:
        return instruction
    return f'{instruction}\n\nAlternatively, you can say to Siri: "{voice_phrase}"'


def filter_automations(lines: Iterable[str], name_filter: Optional[str] = None) -> List[str]:
    """Keep non-blank catalogue lines matching ``name_filter``, or any Home keyword when no filter is given.

    Matching is a case-insensitive substring test.
    """
    names = [line for line in lines if line.strip()]
    if name_filter:
        needle = name_filter.lower()
        return [name for name in names if needle in name.lower()]
    return [name for name in names if any(keyword in name.lower() for keyword in HOME_KEYWORDS)]


def list_result(outcome: InvocationOutcome, name_filter: Optional[str] = None) -> ToolResponse:
    if outcome.failed:
        return ToolResponse.error(f"{LIST_FAILED}\n\n{outcome.diagnostic}")

    matches = filter_automations(outcome.stdout.split("\n"), name_filter)
    if not matches:
        if name_filter:
            return ToolResponse.text(f"No shortcuts found matching: {name_filter.lower()}")
        return ToolResponse.text(NO_HOME_SHORTCUTS)
    return ToolResponse.text(LIST_HEADER + "\n" + "\n".join(matches))


def format_number(value: Union[int, float]) -> str:
    """Render a number the way the caller wrote it: ``72`` and ``72.0`` both become ``"72"``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def unit_symbol(unit: str) -> str:
    return "C" if unit == "celsius" else "F"
