# tests/unit/test_output.py
"""Tests for PlanDocument assembly and markdown rendering."""

from datetime import datetime, timezone

from planwright.models.plan import PhaseName, PhaseResult, PlanDocument
from planwright.planning.output import PlanRenderer


def _doc(topic: str = "A todo app with reminders") -> PlanDocument:
    return PlanDocument.assemble(
        [
            PhaseResult(PhaseName.FOUNDATIONAL_RESEARCH, "research", queries=("q1", "q2"), evidence_count=4),
            PhaseResult(PhaseName.COMPONENT_ANALYSIS, "components"),
            PhaseResult(PhaseName.SYNTHESIS, "final plan"),
        ],
        topic=topic,
        searches_used=2,
        max_searches=20,
    )


def test_assemble_summary_is_deterministic():
    doc = _doc()
    assert doc.summary == (
        "foundational_research (8 chars) | component_analysis (10 chars) | synthesis (10 chars)"
    )
    assert doc.final_text == "final plan"
    assert doc.phase(PhaseName.COMPONENT_ANALYSIS).text == "components"


def test_to_dict_shape():
    data = _doc().to_dict()
    assert data["searches_used"] == 2
    assert data["phases"][0] == {
        "phase": "foundational_research",
        "text": "research",
        "queries": ["q1", "q2"],
        "evidence_count": 4,
    }


def test_render_markdown():
    generated = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    markdown = PlanRenderer().render(_doc(), generated_at=generated)

    assert markdown.startswith("---\n")
    assert 'generated_at: "2026-01-02T03:04:05+00:00"' in markdown
    assert "searches_used: 2" in markdown
    assert "max_searches: 20" in markdown
    assert "# Plan: A todo app with reminders" in markdown
    assert "_Searched: `q1`; `q2`_" in markdown

    sections = ["## Foundational Research", "## Component Analysis", "## Synthesis"]
    positions = [markdown.index(s) for s in sections]
    assert positions == sorted(positions)
    assert markdown.rstrip().endswith("final plan")


def test_render_title_uses_first_line_and_fallback():
    renderer = PlanRenderer()
    assert "# Plan: Line one\n" in renderer.render(_doc("Line one\nline two"))
    assert "# Plan: Technical Plan\n" in renderer.render(_doc(""))
