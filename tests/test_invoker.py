import threading
from typing import List

import pytest

from home_mcp import CommandBuilder, CommandLine, HomeConfig, InvocationOutcome, ProcessInvoker, Program

from conftest import requires_posix_shell

pytestmark = requires_posix_shell


def _echo_runner() -> HomeConfig:
    """Use `echo` as the automation runner so the rendered arguments come back on stdout."""
    return HomeConfig(automation_runner="echo")


def test_successful_run_returns_stdout() -> None:
    config = _echo_runner()
    outcome = ProcessInvoker(config).run(CommandBuilder(config).run_automation("Lights On"))

    assert not outcome.failed
    assert outcome.stdout == "run Lights On\n"
    assert outcome.text == "run Lights On"
    assert outcome.diagnostic is None


def test_hostile_arguments_reach_the_program_verbatim() -> None:
    """Shell metacharacters in names and inputs are passed as data and never executed."""
    config = _echo_runner()
    name = "x'; echo INJECTED; '"
    payload = "$(echo INJECTED) `echo INJECTED` | cat"

    outcome = ProcessInvoker(config).run(CommandBuilder(config).run_automation(name, payload))

    assert not outcome.failed
    assert outcome.text == f"run {name} -i {payload}"


def test_failure_prefers_stderr() -> None:
    config = HomeConfig(automation_runner="ls")
    outcome = ProcessInvoker(config).run(CommandBuilder(config).run_automation("/definitely/not/here"))

    assert outcome.failed
    assert outcome.stdout == ""
    assert "/definitely/not/here" in outcome.diagnostic


def test_failure_without_stderr_uses_generic_message() -> None:
    config = HomeConfig(automation_runner="false")
    command = CommandBuilder(config).run_automation("Lock Doors")

    outcome = ProcessInvoker(config).run(command)

    assert outcome.failed
    assert outcome.diagnostic == "Command failed with exit code 1: false run 'Lock Doors'"


def test_missing_program_is_a_failure() -> None:
    config = HomeConfig(automation_runner="home-mcp-no-such-program")
    outcome = ProcessInvoker(config).run(CommandBuilder(config).list_automations())

    assert outcome.failed
    assert outcome.diagnostic


def test_spawn_failure_is_reported() -> None:
    """A NUL byte cannot be passed to a process; the invoker reports it instead of raising."""
    config = _echo_runner()
    outcome = ProcessInvoker(config).run(CommandBuilder(config).run_automation("bad\x00name"))

    assert outcome.failed
    assert outcome.diagnostic.startswith("Failed to start command:")


def test_output_ceiling() -> None:
    config = HomeConfig(automation_runner="echo", max_output_bytes=16)
    outcome = ProcessInvoker(config).run(CommandBuilder(config).run_automation("x" * 64))

    assert outcome.failed
    assert outcome.diagnostic == "Command output exceeded 16 bytes"


def test_output_ceiling_stops_endless_output() -> None:
    """A program that never stops writing is killed once it passes the ceiling, even without a timeout."""
    invoker = ProcessInvoker(HomeConfig(max_output_bytes=1024))
    outcomes: List[InvocationOutcome] = []

    worker = threading.Thread(
        target=lambda: outcomes.append(invoker.run(CommandLine(Program.AUTOMATION_RUNNER, "yes"))), daemon=True
    )
    worker.start()
    worker.join(timeout=10)

    assert not worker.is_alive(), "run() kept blocking after output passed the ceiling"
    assert outcomes[0].failed
    assert outcomes[0].diagnostic == "Command output exceeded 1024 bytes"


def test_output_ceiling_counts_stderr() -> None:
    command = CommandLine(Program.AUTOMATION_RUNNER, "ls").with_value("/" + "missing" * 20)
    outcome = ProcessInvoker(HomeConfig(max_output_bytes=8)).run(command)

    assert outcome.failed
    assert outcome.diagnostic == "Command output exceeded 8 bytes"


def test_timeout_kills_the_program() -> None:
    config = HomeConfig(command_timeout=0.2)
    command = CommandLine(Program.AUTOMATION_RUNNER, "sleep").with_flag("5")

    outcome = ProcessInvoker(config).run(command)

    assert outcome.failed
    assert outcome.diagnostic == "Command timed out after 0.2 seconds"


def test_no_timeout_by_default() -> None:
    assert HomeConfig().command_timeout is None


@pytest.mark.parametrize("text", ["  padded  \n", "\nLights On\n\n"])
def test_stdout_is_kept_raw_and_text_is_stripped(text: str) -> None:
    config = HomeConfig(automation_runner="printf")
    command = CommandLine(Program.AUTOMATION_RUNNER, "printf").with_flag("%s").with_value(text)

    outcome = ProcessInvoker(config).run(command)

    assert outcome.stdout == text
    assert outcome.text == text.strip()
