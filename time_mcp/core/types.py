"""Shared type definitions."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Mapping


@dataclass(slots=True, frozen=True)
class TextContentBlock:
    """A single text fragment of a tool result."""

    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(slots=True)
class ToolInvocationResult:
    """Ordered content blocks produced by one tool call."""

    content: list[TextContentBlock] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"content": [block.to_dict() for block in self.content]}


@dataclass(slots=True)
class ToolCallTrace:
    """Bookkeeping for a single dispatched tool call."""

    call_id: str
    name: str
    arguments: Mapping[str, Any]
    result: ToolInvocationResult
    latency_ms: float
    timestamp: datetime
