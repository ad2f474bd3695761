"""Compose command lines for the script interpreter and the automation runner."""

from typing import Optional

from ..config import HomeConfig
from .command_line import CommandLine, Program


class CommandBuilder:
    """Pure string construction for the two external subsystems. Never executes anything."""

    def __init__(self, config: HomeConfig):
        self._config = config

    def script(self, script: str) -> CommandLine:
        """``<interpreter> -e <quoted script>``"""
        return CommandLine(Program.SCRIPT_INTERPRETER, self._config.script_interpreter).with_flag("-e").with_value(script)

    def run_automation(self, name: str, input_text: Optional[str] = None) -> CommandLine:
        """``<runner> run <quoted name>`` with ``-i <quoted input>`` appended when input is non-empty.

        Args:
            name: The automation name, usually derived from caller input.
            input_text: Optional payload handed to the automation.

        Returns:
            The command line value.
        """
        command = self._runner().with_flag("run").with_value(name)
        if input_text:
            command = command.with_flag("-i").with_value(input_text)
        return command

    def list_automations(self) -> CommandLine:
        """``<runner> list``"""
        return self._runner().with_flag("list")

    def _runner(self) -> CommandLine:
        return CommandLine(Program.AUTOMATION_RUNNER, self._config.automation_runner)
