# planwright/planning/evidence.py
"""
Evidence formatting with a size bound.

Entries are ordered rank-first (every query's top hit, then every query's
second hit, ...) so the highest-ranked results survive truncation.
"""

import logging
from dataclasses import dataclass

from planwright.models.plan import Evidence, SearchResult

logger = logging.getLogger(__name__)

NO_EVIDENCE = "(No web search evidence was gathered for this phase.)"


@dataclass(frozen=True)
class BoundedEvidence:
    """Formatted evidence block plus what was kept/dropped."""

    text: str
    kept: int
    dropped: int


def _format_entry(query: str, rank: int, result: SearchResult) -> str:
    return (
        f"[{query} #{rank}] {result.title}\n"
        f"URL: {result.url}\n"
        f"{result.snippet}".rstrip()
    )


def rank_ordered(evidence: list[Evidence]) -> list[tuple[str, int, SearchResult]]:
    """Flatten evidence into (query, rank, result), sorted by rank then query order."""
    entries = [
        (rank, ev.query_index, ev.query, result)
        for ev in evidence
        for rank, result in enumerate(ev.results, start=1)
    ]
    entries.sort(key=lambda e: (e[0], e[1]))
    return [(query, rank, result) for rank, _, query, result in entries]


def bound_evidence(evidence: list[Evidence], max_chars: int) -> BoundedEvidence:
    """
    Format evidence for a prompt, keeping at most max_chars of entries.

    Args:
        evidence: Evidence gathered in the current phase
        max_chars: Size bound for the formatted block

    Returns:
        BoundedEvidence; ``text`` is NO_EVIDENCE when nothing was kept
    """
    ordered = rank_ordered(evidence)
    parts: list[str] = []
    used = 0

    for query, rank, result in ordered:
        entry = _format_entry(query, rank, result)
        cost = len(entry) + (2 if parts else 0)
        if used + cost > max_chars:
            break
        parts.append(entry)
        used += cost

    kept = len(parts)
    dropped = len(ordered) - kept
    text = "\n\n".join(parts) if parts else NO_EVIDENCE
    if dropped:
        logger.info(
            f"Evidence truncated: kept {kept}, dropped {dropped} lower-ranked results "
            f"(bound {max_chars} chars)"
        )
        text += f"\n\n[{dropped} lower-ranked results omitted to fit the evidence limit]"
    return BoundedEvidence(text=text, kept=kept, dropped=dropped)
