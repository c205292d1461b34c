# planwright/planning/phases/components.py
"""
Phase 2: Component analysis.

Narrow searches, one per component named by the foundational research.
"""

from planwright.models.plan import PhaseName
from planwright.planning.context import PhaseContext
from planwright.planning.phases.base import Phase
from planwright.planning.queries import condense_topic, narrow_queries


class ComponentAnalysisPhase(Phase):
    """Per-component technology choices, interfaces and data."""

    @property
    def name(self) -> PhaseName:
        return PhaseName.COMPONENT_ANALYSIS

    def derive_queries(self, context: PhaseContext, limit: int) -> list[str]:
        research = context.result_for(PhaseName.FOUNDATIONAL_RESEARCH)
        prior = research.text if research else context.prior_text()
        return narrow_queries(condense_topic(context.request.topic), prior, limit)
