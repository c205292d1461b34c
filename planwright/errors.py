# planwright/errors.py
"""
Error taxonomy for planning and chat requests.

Gateway errors (SearchError, ProviderError) are raised by the leaf gateways.
BudgetExhausted is a control signal, never shown to the user. The terminal
outcomes a caller must tell apart are Cancelled, PhaseFailed and
ChatProviderFailed.
"""


class PlannerError(Exception):
    """Base class for all planwright errors."""


class SearchError(PlannerError):
    """A single web search failed (transport error, timeout, bad page)."""


class ProviderError(PlannerError):
    """The LLM completion call failed or timed out."""


class BudgetExhausted(PlannerError):
    """No search reservations remain for this request."""

    def __init__(self, max_searches: int) -> None:
        super().__init__(f"Search budget exhausted ({max_searches} searches)")
        self.max_searches = max_searches


class PlanningError(PlannerError):
    """Terminal failure of a create_plan request."""


class ChatError(PlannerError):
    """Terminal failure of a chat request."""


class Cancelled(PlanningError, ChatError):
    """The caller cancelled the request; no partial result is returned."""

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message)


class PhaseFailed(PlanningError):
    """
    A planning phase could not produce its synthesized text.

    Attributes:
        phase: Name of the phase that failed
        cause: The underlying ProviderError
    """

    def __init__(self, phase: str, cause: BaseException) -> None:
        super().__init__(f"Phase '{phase}' failed: {cause}")
        self.phase = phase
        self.cause = cause


class ChatProviderFailed(ChatError):
    """The completion provider failed during a chat turn."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Chat completion failed: {cause}")
        self.cause = cause
