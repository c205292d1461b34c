"""
Planning phase implementations.

Exports the three phases, the PhaseRunner, and DEFAULT_PHASES in the
order the PlanningOrchestrator runs them.
"""

from planwright.planning.phases.base import Phase
from planwright.planning.phases.components import ComponentAnalysisPhase
from planwright.planning.phases.research import FoundationalResearchPhase
from planwright.planning.phases.runner import PhaseRunner
from planwright.planning.phases.synthesis import SynthesisPhase

DEFAULT_PHASES: list[Phase] = [
    FoundationalResearchPhase(),
    ComponentAnalysisPhase(),
    SynthesisPhase(),
]

__all__ = [
    "Phase",
    "PhaseRunner",
    "FoundationalResearchPhase",
    "ComponentAnalysisPhase",
    "SynthesisPhase",
    "DEFAULT_PHASES",
]
