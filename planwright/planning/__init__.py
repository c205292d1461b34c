"""
Planning core: budget, cancellation, phases and the two orchestrators.
"""

from planwright.planning.budget import BudgetTracker
from planwright.planning.cancellation import CancellationToken
from planwright.planning.chat import ChatOrchestrator
from planwright.planning.context import PhaseContext
from planwright.planning.factory import create_orchestrators
from planwright.planning.orchestrator import PlanningOrchestrator, PlanState
from planwright.planning.output import PlanRenderer

__all__ = [
    "BudgetTracker",
    "CancellationToken",
    "ChatOrchestrator",
    "PhaseContext",
    "create_orchestrators",
    "PlanningOrchestrator",
    "PlanState",
    "PlanRenderer",
]
