# planwright/models/responses.py
"""
Pydantic request/response models for the HTTP API and MCP tools.

Both surfaces return the same JSON shapes so callers can tell the three
terminal outcomes apart by ``status``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MessageIn(BaseModel):
    """One conversation turn as sent by a client."""

    model_config = ConfigDict(extra="ignore")

    role: Literal["user", "assistant"] = Field(description="Who said it")
    content: str = Field(description="Message text")


class ConversationRequest(BaseModel):
    """Request body for /planner/create_plan and /planner/chat."""

    model_config = ConfigDict(extra="ignore")

    messages: list[MessageIn] = Field(min_length=1, description="Conversation so far")


class PhaseOut(BaseModel):
    """One phase of a finished plan."""

    phase: str = Field(description="Phase identifier")
    text: str = Field(description="Synthesized phase text")


class PlanResponse(BaseModel):
    """Successful create_plan result."""

    status: Literal["ok"] = "ok"
    summary: str = Field(description="Phase names and output lengths")
    phases: list[PhaseOut] = Field(description="Phase results in order")
    searches_used: int = Field(ge=0, description="Web searches used by this plan")
    markdown: str = Field(description="Rendered plan document")


class ChatResponse(BaseModel):
    """Successful chat result."""

    status: Literal["ok"] = "ok"
    content: str = Field(description="Assistant reply")


class CancelledResponse(BaseModel):
    """The request was stopped before completion."""

    status: Literal["cancelled"] = "cancelled"
    message: str = Field(default="Request cancelled", description="Notice for the user")


class ErrorResponse(BaseModel):
    """The request failed."""

    status: Literal["error"] = "error"
    error: str = Field(description="What went wrong")
    phase: str | None = Field(default=None, description="Failed phase (planning only)")
