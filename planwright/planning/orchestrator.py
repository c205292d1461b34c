# planwright/planning/orchestrator.py
"""
PlanningOrchestrator: runs the three planning phases in fixed order.

FOUNDATIONAL_RESEARCH -> COMPONENT_ANALYSIS -> SYNTHESIS -> DONE, with
ABORTED reachable from any running state. No phase is skipped or
repeated, and a request either yields a full PlanDocument or raises.
"""

import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import Any

from planwright.errors import Cancelled, PhaseFailed
from planwright.llm.gateway import CompletionGateway
from planwright.models.messages import PlanRequest
from planwright.models.plan import PhaseName, PlanDocument
from planwright.planning.budget import BudgetTracker
from planwright.planning.cancellation import CancellationToken
from planwright.planning.context import PhaseContext
from planwright.planning.phases import DEFAULT_PHASES, Phase, PhaseRunner
from planwright.search.gateway import SearchGateway

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], None] | Callable[[float, str], Any]


class PlanState(Enum):
    """Orchestrator states. DONE and ABORTED are terminal."""

    FOUNDATIONAL_RESEARCH = "foundational_research"
    COMPONENT_ANALYSIS = "component_analysis"
    SYNTHESIS = "synthesis"
    DONE = "done"
    ABORTED = "aborted"

    @property
    def terminal(self) -> bool:
        return self in (PlanState.DONE, PlanState.ABORTED)


TRANSITIONS: dict[PlanState, PlanState] = {
    PlanState.FOUNDATIONAL_RESEARCH: PlanState.COMPONENT_ANALYSIS,
    PlanState.COMPONENT_ANALYSIS: PlanState.SYNTHESIS,
    PlanState.SYNTHESIS: PlanState.DONE,
}

_STATE_PHASE: dict[PlanState, PhaseName] = {
    PlanState.FOUNDATIONAL_RESEARCH: PhaseName.FOUNDATIONAL_RESEARCH,
    PlanState.COMPONENT_ANALYSIS: PhaseName.COMPONENT_ANALYSIS,
    PlanState.SYNTHESIS: PhaseName.SYNTHESIS,
}


def transition(state: PlanState, aborted: bool = False) -> PlanState:
    """
    Next state after the current phase finishes or aborts.

    Raises:
        ValueError: If state is already terminal
    """
    if state.terminal:
        raise ValueError(f"No transition out of terminal state {state.value}")
    next_state = PlanState.ABORTED if aborted else TRANSITIONS[state]
    logger.debug(f"Transition {state.value} -> {next_state.value}")
    return next_state


async def _notify(callback: ProgressCallback | None, progress: float, phase: str) -> None:
    if callback:
        result_or_coro = callback(progress, phase)
        if hasattr(result_or_coro, "__await__"):
            await result_or_coro


class PlanningOrchestrator:
    """
    Sequences the planning phases for one request at a time.

    The orchestrator itself holds only configuration and gateways, so one
    instance can serve many concurrent requests. BudgetTracker and
    PhaseContext are created fresh inside every create_plan() call.

    Example:
        orchestrator = PlanningOrchestrator(search, completion, max_searches=20)
        doc = await orchestrator.create_plan(PlanRequest.from_text("a todo app"))
    """

    def __init__(
        self,
        search_gateway: SearchGateway,
        completion_gateway: CompletionGateway,
        max_searches: int = 20,
        max_queries_per_phase: int = 4,
        max_evidence_chars: int = 12000,
        phases: list[Phase] | None = None,
    ) -> None:
        self._runner = PhaseRunner(
            search_gateway,
            completion_gateway,
            max_queries_per_phase=max_queries_per_phase,
            max_evidence_chars=max_evidence_chars,
        )
        self._max_searches = max_searches
        self._phases = {p.name: p for p in (phases or DEFAULT_PHASES)}
        missing = [name.value for name in PhaseName if name not in self._phases]
        if missing:
            raise ValueError(f"Missing phase implementations: {missing}")

    @property
    def max_searches(self) -> int:
        return self._max_searches

    async def create_plan(
        self,
        request: PlanRequest,
        token: CancellationToken | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> PlanDocument:
        """
        Run all phases and assemble the plan.

        Args:
            request: Frozen conversation to plan for
            token: Cancellation token owned by the caller (fresh one if None)
            progress_callback: Optional callback(progress, phase); may be async

        Returns:
            PlanDocument with one PhaseResult per phase, in order

        Raises:
            Cancelled: Token was set at a checkpoint; nothing partial is returned
            PhaseFailed: A phase's completion call failed
        """
        token = token or CancellationToken()
        budget = BudgetTracker(self._max_searches)
        context = PhaseContext(request=request)
        total = len(_STATE_PHASE)
        t0 = time.monotonic()

        state = PlanState.FOUNDATIONAL_RESEARCH
        step = 0
        while not state.terminal:
            phase = self._phases[_STATE_PHASE[state]]
            try:
                token.raise_if_cancelled()
                logger.info(f"Executing phase: {phase.name.value}")
                await _notify(progress_callback, step / total, phase.name.value)
                await self._runner.run(phase, context, budget, token)
            except Cancelled:
                logger.info(f"Plan cancelled during {state.value}")
                state = transition(state, aborted=True)
                raise
            except PhaseFailed:
                logger.error(f"Plan failed during {state.value}")
                state = transition(state, aborted=True)
                raise

            step += 1
            await _notify(progress_callback, step / total, f"{phase.name.value}_complete")
            state = transition(state)

        doc = PlanDocument.assemble(
            context.results,
            topic=request.topic,
            searches_used=budget.searches_used,
            max_searches=budget.max_searches,
        )
        logger.info(
            f"Plan complete in {time.monotonic() - t0:.1f}s "
            f"({budget.searches_used}/{budget.max_searches} searches)"
        )
        return doc
