# planwright/planning/phases/research.py
"""
Phase 1: Foundational research.

Broad searches about the topic as a whole. The prompt asks the model to
close with a COMPONENTS: list, which the next phase searches on.
"""

from planwright.models.plan import PhaseName
from planwright.planning.context import PhaseContext
from planwright.planning.phases.base import Phase
from planwright.planning.queries import broad_queries, condense_topic


class FoundationalResearchPhase(Phase):
    """Landscape research: architectures, stacks, best practices, pitfalls."""

    @property
    def name(self) -> PhaseName:
        return PhaseName.FOUNDATIONAL_RESEARCH

    def derive_queries(self, context: PhaseContext, limit: int) -> list[str]:
        return broad_queries(condense_topic(context.request.topic), limit)
