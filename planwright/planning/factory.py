# planwright/planning/factory.py
"""Build both orchestrators from a PlannerConfig, sharing one LLM client."""

from planwright.config.schema import PlannerConfig
from planwright.llm.factory import create_completion_gateway
from planwright.planning.chat import ChatOrchestrator
from planwright.planning.orchestrator import PlanningOrchestrator
from planwright.search.factory import create_search_gateway


def create_orchestrators(
    config: PlannerConfig,
) -> tuple[PlanningOrchestrator, ChatOrchestrator]:
    """
    Create the planning and chat orchestrators for config.

    Raises:
        ValueError: If the active provider is misconfigured (e.g. no API key)
    """
    completion = create_completion_gateway(config)
    planner = PlanningOrchestrator(
        create_search_gateway(config),
        completion,
        max_searches=config.planning.max_searches,
        max_queries_per_phase=config.planning.max_queries_per_phase,
        max_evidence_chars=config.planning.max_evidence_chars,
    )
    return planner, ChatOrchestrator(completion)
