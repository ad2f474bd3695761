"""Runtime configuration for the Home tool server.

All ``HOME_MCP_*`` environment variables are loaded automatically; empty
variables fall back to the field defaults. There is no configuration file.
"""

import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROGRAM_PATTERN = re.compile(r"^[A-Za-z0-9._/+-]+$")

DEFAULT_MAX_OUTPUT_BYTES = 50 * 1024 * 1024


class HomeConfig(BaseSettings):
    """
    Settings for the external programs the server delegates to.

    Attributes:
        script_interpreter: Executable that runs a script passed via ``-e``.
        automation_runner: Executable that runs a named automation via ``run``.
        max_output_bytes: Output ceiling for a single invocation. A program
                          writing more is killed and the call fails.
        command_timeout: Optional limit in seconds for a single invocation.
                         None waits for the external program indefinitely.
        log_level: Level name passed to ``setup_logging``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOME_MCP_",
        env_ignore_empty=True,
        extra="ignore",
    )

    script_interpreter: str = "osascript"
    automation_runner: str = "shortcuts"
    max_output_bytes: int = Field(default=DEFAULT_MAX_OUTPUT_BYTES, ge=1)
    command_timeout: Optional[float] = Field(default=None, gt=0)
    log_level: str = "INFO"

    @field_validator("script_interpreter", "automation_runner")
    @classmethod
    def _plain_program_name(cls, value: str) -> str:
        if not _PROGRAM_PATTERN.match(value):
            raise ValueError(f"Program name must be a plain token, got {value!r}")
        return value

    @classmethod
    def from_env(cls) -> "HomeConfig":
        """Alias for ``HomeConfig()``, which reads the environment."""
        return cls()
