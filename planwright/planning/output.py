# planwright/planning/output.py
"""
Plan renderer for converting a PlanDocument to markdown.

Produces a metadata frontmatter block, a title from the request topic,
and one section per phase in pipeline order.
"""

from datetime import datetime, timezone

from planwright.models.plan import PlanDocument

MAX_TITLE_CHARS = 80


class PlanRenderer:
    """
    Converts PlanDocument to markdown.

    Format:
        ---
        generated_at: ISO timestamp
        searches_used: int
        max_searches: int
        summary: one-line phase summary
        ---

        # Plan: {topic}

        ## Foundational Research
        ...

        ## Component Analysis
        ...

        ## Synthesis
        ...
    """

    def render(self, doc: PlanDocument, generated_at: datetime | None = None) -> str:
        """
        Render a PlanDocument to a markdown string.

        Args:
            doc: Completed plan
            generated_at: Timestamp for the frontmatter (defaults to now, UTC)

        Returns:
            Formatted markdown string
        """
        sections = [self._render_frontmatter(doc, generated_at or datetime.now(timezone.utc))]

        title = doc.topic.split("\n")[0].strip()[:MAX_TITLE_CHARS] or "Technical Plan"
        sections.append(f"# Plan: {title}")
        sections.append("")

        for result in doc.phases:
            sections.append(f"## {result.phase.title}")
            sections.append("")
            sections.append(result.text)
            sections.append("")
            if result.queries:
                sections.append(
                    "_Searched: " + "; ".join(f"`{q}`" for q in result.queries) + "_"
                )
                sections.append("")

        return "\n".join(sections).rstrip() + "\n"

    def _render_frontmatter(self, doc: PlanDocument, generated_at: datetime) -> str:
        """Render YAML frontmatter with metadata."""
        lines = ["---"]
        lines.append(f'generated_at: "{generated_at.isoformat()}"')
        lines.append(f"searches_used: {doc.searches_used}")
        lines.append(f"max_searches: {doc.max_searches}")
        lines.append(f'summary: "{doc.summary}"')
        lines.append("---")
        lines.append("")
        return "\n".join(lines)
