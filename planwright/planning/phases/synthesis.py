# planwright/planning/phases/synthesis.py
"""Phase 3: Synthesis. No searches; folds prior phases into the final plan."""

from planwright.models.plan import PhaseName
from planwright.planning.context import PhaseContext
from planwright.planning.phases.base import Phase


class SynthesisPhase(Phase):
    @property
    def name(self) -> PhaseName:
        return PhaseName.SYNTHESIS

    def derive_queries(self, context: PhaseContext, limit: int) -> list[str]:
        return []
