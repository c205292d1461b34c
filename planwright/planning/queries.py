# planwright/planning/queries.py
"""
Deterministic search-query derivation.

Foundational research asks broad questions about the topic; component
analysis asks narrow questions about the components the first phase
named. Same inputs always give the same queries, in the same order.
"""

import re

_STOP_WORDS = frozenset(
    """
    a an and are as at be but by can could d do for from have help how i ll m
    in into is it its let me my need of on or our please plan re s should so some t
    that the their them then there these this to using want we what when where
    ve which who will with would you your build create make like
    """.split()
)

MAX_TOPIC_WORDS = 12
MAX_COMPONENT_WORDS = 6

_BROAD_TEMPLATES = [
    "{topic} architecture overview",
    "{topic} technology stack comparison",
    "{topic} best practices",
    "{topic} open source reference implementation",
    "{topic} common pitfalls",
]

_FALLBACK_COMPONENTS = [
    "data model",
    "api design",
    "deployment",
    "testing strategy",
]

_COMPONENTS_HEADING = re.compile(r"^\s*(?:#+\s*)?\**components\**\s*:?\**\s*$", re.IGNORECASE)
_LIST_ITEM = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.+?)\s*$")
_SUB_HEADING = re.compile(r"^\s*#{2,3}\s+(.+?)\s*#*\s*$")


def condense_topic(text: str, max_words: int = MAX_TOPIC_WORDS) -> str:
    """
    Reduce a free-form request to a compact search topic.

    Lowercases, keeps word characters (plus . + # -), drops stop words and
    repeats, and caps the word count.
    """
    words = re.findall(r"[a-z0-9][a-z0-9.+#-]*", text.lower())
    kept: list[str] = []
    for word in words:
        word = word.rstrip(".-")
        if not word or word in _STOP_WORDS or word in kept:
            continue
        kept.append(word)
        if len(kept) >= max_words:
            break
    return " ".join(kept)


def _clean_component(raw: str) -> str:
    # "**Auth service** - handles login" -> "auth service"
    name = re.split(r"\s[-–—:]\s|:\s", raw, maxsplit=1)[0]
    name = re.sub(r"[*_`\[\]()]", "", name).strip(" .")
    return " ".join(name.split()[:MAX_COMPONENT_WORDS]).lower()


def extract_components(text: str) -> list[str]:
    """
    Find component names in a phase's output.

    Looks for list items under a "COMPONENTS:" heading first; falls back
    to level-2/3 markdown headings. Order preserved, duplicates removed.
    """
    lines = text.splitlines()
    components: list[str] = []

    in_section = False
    for line in lines:
        if _COMPONENTS_HEADING.match(line):
            in_section = True
            continue
        if not in_section:
            continue
        item = _LIST_ITEM.match(line)
        if item:
            components.append(_clean_component(item.group(1)))
        elif line.strip() and components:
            # First non-list line after the list ends the section
            break

    if not components:
        for line in lines:
            heading = _SUB_HEADING.match(line)
            if heading:
                components.append(_clean_component(heading.group(1)))

    unique: list[str] = []
    for name in components:
        if name and name not in unique:
            unique.append(name)
    return unique


def broad_queries(topic: str, limit: int) -> list[str]:
    """Foundational research queries for a condensed topic."""
    if not topic or limit <= 0:
        return []
    return [t.format(topic=topic) for t in _BROAD_TEMPLATES][:limit]


def narrow_queries(topic: str, prior_text: str, limit: int) -> list[str]:
    """Component analysis queries: one per component named in prior_text."""
    if limit <= 0:
        return []

    components = extract_components(prior_text) or list(_FALLBACK_COMPONENTS)
    short_topic = " ".join(topic.split()[:4])

    queries: list[str] = []
    for component in components:
        query = f"{component} {short_topic} implementation".strip()
        query = " ".join(query.split())
        if query not in queries:
            queries.append(query)
        if len(queries) >= limit:
            break
    return queries
