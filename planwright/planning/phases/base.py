# planwright/planning/phases/base.py
"""
Abstract base class for planning phases.

A phase decides which searches it wants and how its prompt is laid out.
Running it (budget, cancellation, gateways) is the PhaseRunner's job.
"""

import logging
from abc import ABC, abstractmethod

from planwright.models.messages import Role
from planwright.models.plan import PhaseName
from planwright.planning.context import PhaseContext
from planwright.planning.prompts import SYSTEM_PROMPT, load_prompt

logger = logging.getLogger(__name__)

NO_PRIOR_PHASES = "(No prior phases.)"


class Phase(ABC):
    """
    One step of the planning pipeline.

    Subclasses define:
    1. name: which PhaseName they produce
    2. derive_queries: the bounded, deterministic list of searches to run
    3. prompt_name: the template under planning/prompts/

    Prompt layout is shared: system prompt, the earlier conversation turns,
    then one user message holding the phase instructions, the request,
    the finalized text of all prior phases and the evidence block.
    """

    @property
    @abstractmethod
    def name(self) -> PhaseName:
        pass

    @property
    def prompt_name(self) -> str:
        """Template filename without .txt (defaults to the phase value)."""
        return self.name.value

    @abstractmethod
    def derive_queries(self, context: PhaseContext, limit: int) -> list[str]:
        """
        Search queries for this phase.

        Args:
            context: Accumulated request state (prior phases are final)
            limit: Maximum number of queries to return

        Returns:
            At most ``limit`` queries, same inputs giving the same list
        """
        pass

    def build_prompt(self, context: PhaseContext, evidence_text: str) -> list[dict]:
        """
        Build chat messages for this phase's completion call.

        Args:
            context: Accumulated request state
            evidence_text: Bounded evidence block for this phase

        Returns:
            List of message dicts with "role" and "content" keys
        """
        messages = list(context.request.messages)
        # The latest user turn is folded into the phase message below
        for i in range(len(messages) - 1, -1, -1):
            if messages[i].role is Role.USER:
                del messages[i]
                break

        template = load_prompt(self.prompt_name)
        content = template.format(
            request=context.request.topic,
            prior_phases=context.prior_text() or NO_PRIOR_PHASES,
            evidence=evidence_text,
        )

        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            *(m.to_dict() for m in messages),
            {"role": "user", "content": content},
        ]
