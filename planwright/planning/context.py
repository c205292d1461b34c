# planwright/planning/context.py
"""
PhaseContext: the accumulator threaded through one planning request.

Created by the orchestrator at the start of a request, discarded at the
end. Never shared between requests.
"""

import logging
from dataclasses import dataclass, field

from planwright.models.messages import PlanRequest
from planwright.models.plan import Evidence, PhaseName, PhaseResult

logger = logging.getLogger(__name__)


@dataclass
class PhaseContext:
    """
    Mutable state for one planning request.

    Attributes:
        request: The frozen conversation being planned
        phase: Phase currently executing (None before the first)
        evidence: Evidence gathered so far, keyed by phase
        results: Finalized phase results, in order
    """

    request: PlanRequest
    phase: PhaseName | None = None
    evidence: dict[PhaseName, list[Evidence]] = field(default_factory=dict)
    results: list[PhaseResult] = field(default_factory=list)

    def begin_phase(self, phase: PhaseName) -> None:
        self.phase = phase
        self.evidence.setdefault(phase, [])

    def add_evidence(self, evidence: Evidence) -> None:
        if self.phase is None:
            raise RuntimeError("add_evidence() called before begin_phase()")
        self.evidence[self.phase].append(evidence)

    def phase_evidence(self, phase: PhaseName | None = None) -> list[Evidence]:
        return list(self.evidence.get(phase or self.phase, []))

    def record(self, result: PhaseResult) -> None:
        """Append a finalized phase result; later phases see it in prior_text()."""
        self.results.append(result)
        logger.debug(f"Recorded {result.phase.value} ({len(result.text)} chars)")

    def result_for(self, phase: PhaseName) -> PhaseResult | None:
        return next((r for r in self.results if r.phase is phase), None)

    def prior_text(self) -> str:
        """Finalized text of all completed phases, in order, as markdown sections."""
        return "\n\n".join(f"## {r.phase.title}\n\n{r.text}" for r in self.results)
