"""Request and response envelopes exchanged with the protocol layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ToolRequest:
    """A normalized call of one named operation."""

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


class TextBlock(BaseModel):
    """A single text content block."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """
    The only externally observable result of a call.

    Attributes:
        content: Ordered text blocks. Never empty.
        is_error: True when the request itself failed. None or False means the
                  request succeeded, possibly with guidance text.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: List[TextBlock] = Field(min_length=1)
    is_error: Optional[bool] = Field(default=None, alias="isError")

    @classmethod
    def text(cls, text: str) -> ToolResponse:
        return cls(content=[TextBlock(text=text)])

    @classmethod
    def error(cls, text: str) -> ToolResponse:
        return cls(content=[TextBlock(text=text)], is_error=True)

    @property
    def joined_text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with protocol field names, omitting an unset error flag."""
        return self.model_dump(by_alias=True, exclude_none=True)
