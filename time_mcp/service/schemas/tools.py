"""Pydantic schemas for the JSON tool routes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ContentBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolInvocationPayload(BaseModel):
    content: list[ContentBlock] = Field(default_factory=list)


class ToolCallResponse(BaseModel):
    tool: str
    call_id: str
    latency_ms: float = Field(..., description="Wall-clock time spent inside the tool")
    result: ToolInvocationPayload


class ToolSchemaEntry(BaseModel):
    type: Literal["function"] = "function"
    function: dict[str, Any]
