# planwright/planning/phases/runner.py
"""
PhaseRunner: executes exactly one phase against the gateways.

Per query: cancellation checkpoint, budget reservation, search. Then one
completion call over the bounded evidence. Search failures are skipped;
a completion failure fails the phase.
"""

import logging
import time

from planwright.errors import BudgetExhausted, PhaseFailed, ProviderError, SearchError
from planwright.llm.gateway import CompletionGateway
from planwright.models.plan import Evidence, PhaseResult
from planwright.planning.budget import BudgetTracker
from planwright.planning.cancellation import CancellationToken
from planwright.planning.context import PhaseContext
from planwright.planning.evidence import bound_evidence
from planwright.planning.phases.base import Phase
from planwright.search.gateway import SearchGateway

logger = logging.getLogger(__name__)


class PhaseRunner:
    """
    Runs a Phase: gather evidence, build the prompt, synthesize.

    Stateless between calls; all per-request state lives in the
    PhaseContext, BudgetTracker and CancellationToken passed to run().

    Example:
        runner = PhaseRunner(search_gateway, completion_gateway)
        result = await runner.run(FoundationalResearchPhase(), context, budget, token)
    """

    def __init__(
        self,
        search_gateway: SearchGateway,
        completion_gateway: CompletionGateway,
        max_queries_per_phase: int = 4,
        max_evidence_chars: int = 12000,
    ) -> None:
        self._search = search_gateway
        self._completion = completion_gateway
        self._max_queries = max_queries_per_phase
        self._max_evidence_chars = max_evidence_chars

    async def gather_evidence(
        self,
        phase: Phase,
        context: PhaseContext,
        budget: BudgetTracker,
        token: CancellationToken,
    ) -> list[str]:
        """
        Issue this phase's searches, in order, recording evidence on the context.

        Returns:
            Queries that were actually sent to the search gateway

        Raises:
            Cancelled: If the token is set before a query
        """
        queries = phase.derive_queries(context, self._max_queries)
        issued: list[str] = []

        for index, query in enumerate(queries):
            token.raise_if_cancelled()

            try:
                budget.try_reserve()
            except BudgetExhausted:
                logger.info(
                    f"[{phase.name.value}] Budget exhausted, skipping "
                    f"{len(queries) - index} remaining queries"
                )
                break

            issued.append(query)
            try:
                results = await self._search.search(query)
            except SearchError as e:
                logger.warning(f"[{phase.name.value}] Search failed for {query!r}: {e}")
                continue

            logger.info(f"[{phase.name.value}] Search {query!r}: {len(results)} results")
            context.add_evidence(Evidence(query=query, results=results, query_index=index))

        return issued

    async def run(
        self,
        phase: Phase,
        context: PhaseContext,
        budget: BudgetTracker,
        token: CancellationToken,
    ) -> PhaseResult:
        """
        Execute one phase and append its result to the context.

        Args:
            phase: Phase to run
            context: Request accumulator (prior phases already recorded)
            budget: Request-scoped search budget
            token: Request-scoped cancellation token

        Returns:
            The finalized PhaseResult (also recorded on the context)

        Raises:
            Cancelled: If the token is set at a checkpoint
            PhaseFailed: If the completion call fails
        """
        t0 = time.monotonic()
        context.begin_phase(phase.name)

        issued = await self.gather_evidence(phase, context, budget, token)

        bounded = bound_evidence(context.phase_evidence(phase.name), self._max_evidence_chars)
        messages = phase.build_prompt(context, bounded.text)

        token.raise_if_cancelled()
        try:
            text = await self._completion.complete(messages)
        except ProviderError as e:
            logger.error(f"[{phase.name.value}] Completion failed: {e}")
            raise PhaseFailed(phase.name.value, e) from e
        token.raise_if_cancelled()

        result = PhaseResult(
            phase=phase.name,
            text=text.strip(),
            queries=tuple(issued),
            evidence_count=bounded.kept,
        )
        context.record(result)
        logger.info(
            f"[{phase.name.value}] Completed in {time.monotonic() - t0:.1f}s "
            f"({len(issued)} searches, {bounded.kept} evidence entries)"
        )
        return result
