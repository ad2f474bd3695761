"""Result of running one external command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InvocationOutcome:
    """Either the raw stdout of a successful run or a failure diagnostic."""

    stdout: str = ""
    failed: bool = False
    diagnostic: Optional[str] = None

    @classmethod
    def success(cls, stdout: str) -> InvocationOutcome:
        return cls(stdout=stdout)

    @classmethod
    def failure(cls, diagnostic: str) -> InvocationOutcome:
        return cls(failed=True, diagnostic=diagnostic)

    @property
    def text(self) -> str:
        """stdout without surrounding whitespace."""
        return self.stdout.strip()
