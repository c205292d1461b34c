# planwright/models/plan.py
"""
Planning data model: search evidence, phase results and the final plan.

All of these are immutable once produced.
"""

from dataclasses import dataclass
from enum import Enum


class PhaseName(Enum):
    """Planning phases, in pipeline order."""

    FOUNDATIONAL_RESEARCH = "foundational_research"
    COMPONENT_ANALYSIS = "component_analysis"
    SYNTHESIS = "synthesis"

    @property
    def title(self) -> str:
        """Human-readable heading (e.g. 'Foundational Research')."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class SearchResult:
    """One ranked web search hit. Read-only evidence."""

    title: str
    snippet: str
    url: str


@dataclass(frozen=True)
class Evidence:
    """
    Results returned for one query within a phase.

    Attributes:
        query: The query text that was searched
        results: Ranked results (index 0 is rank 1)
        query_index: Position of the query within its phase
    """

    query: str
    results: tuple[SearchResult, ...]
    query_index: int = 0


@dataclass(frozen=True)
class PhaseResult:
    """Synthesized output of a single phase."""

    phase: PhaseName
    text: str
    queries: tuple[str, ...] = ()
    evidence_count: int = 0

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "text": self.text,
            "queries": list(self.queries),
            "evidence_count": self.evidence_count,
        }


@dataclass(frozen=True)
class PlanDocument:
    """
    Final output of a successful planning request.

    Attributes:
        phases: Phase results in pipeline order
        summary: Deterministic one-line summary (phase names and lengths)
        topic: What the plan is about (latest user message)
        searches_used: Searches reserved against the budget
        max_searches: Budget ceiling the request ran with
    """

    phases: tuple[PhaseResult, ...]
    summary: str
    topic: str = ""
    searches_used: int = 0
    max_searches: int = 0

    @classmethod
    def assemble(
        cls,
        phases: list[PhaseResult],
        topic: str = "",
        searches_used: int = 0,
        max_searches: int = 0,
    ) -> "PlanDocument":
        """Build the document; the summary is derived, not generated."""
        summary = " | ".join(f"{p.phase.value} ({len(p.text)} chars)" for p in phases)
        return cls(
            phases=tuple(phases),
            summary=summary,
            topic=topic,
            searches_used=searches_used,
            max_searches=max_searches,
        )

    @property
    def final_text(self) -> str:
        """Text of the last phase (the synthesized plan)."""
        return self.phases[-1].text if self.phases else ""

    def phase(self, name: PhaseName) -> PhaseResult | None:
        return next((p for p in self.phases if p.phase is name), None)

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "topic": self.topic,
            "phases": [p.to_dict() for p in self.phases],
            "searches_used": self.searches_used,
            "max_searches": self.max_searches,
        }
