"""Data models: conversation, plan results, session state, API responses."""

from planwright.models.messages import Message, PlanRequest, Role
from planwright.models.plan import Evidence, PhaseName, PhaseResult, PlanDocument, SearchResult
from planwright.models.session import SessionMode, SessionState

__all__ = [
    "Message",
    "PlanRequest",
    "Role",
    "Evidence",
    "PhaseName",
    "PhaseResult",
    "PlanDocument",
    "SearchResult",
    "SessionMode",
    "SessionState",
]
