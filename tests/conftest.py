import shutil
import sys
from typing import Callable
from unittest.mock import MagicMock

import pytest

from home_mcp import HomeConfig, InvocationOutcome, ProcessInvoker, ToolDispatcher

requires_posix_shell = pytest.mark.skipif(
    sys.platform == "win32" or shutil.which("sh") is None, reason="needs a POSIX shell"
)

CONFIG_VARIABLES = (
    "HOME_MCP_SCRIPT_INTERPRETER",
    "HOME_MCP_AUTOMATION_RUNNER",
    "HOME_MCP_MAX_OUTPUT_BYTES",
    "HOME_MCP_COMMAND_TIMEOUT",
    "HOME_MCP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HOME_MCP_* variables from the developer shell out of every test."""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> HomeConfig:
    return HomeConfig()


@pytest.fixture
def mock_invoker() -> MagicMock:
    """A ProcessInvoker double whose runs succeed with empty output unless told otherwise."""
    invoker = MagicMock(spec=ProcessInvoker)
    invoker.run.return_value = InvocationOutcome.success("")
    return invoker


@pytest.fixture
def dispatcher(config: HomeConfig, mock_invoker: MagicMock) -> ToolDispatcher:
    return ToolDispatcher(config=config, invoker=mock_invoker)


@pytest.fixture
def fail_with(mock_invoker: MagicMock) -> Callable[[str], None]:
    """Make every simulated invocation fail with the given diagnostic."""

    def _fail(diagnostic: str) -> None:
        mock_invoker.run.return_value = InvocationOutcome.failure(diagnostic)

    return _fail


def rendered_commands(mock_invoker: MagicMock) -> list[str]:
    return [call.args[0].render() for call in mock_invoker.run.call_args_list]
