"""Fuzzy actor name matching for Costar.

Turns a mistyped actor name into suggestions. Uses RapidFuzz for fuzzy
string matching. Queries themselves only accept exact names; this module
exists so the CLI can say "Did you mean ...".
"""

from dataclasses import dataclass, field

from rapidfuzz import fuzz, process

from costar.core.constants import ACTOR_MATCH_THRESHOLD, MAX_SUGGESTIONS
from costar.core.types import Graph, Titles


@dataclass
class MatchResult:
    """Result of a fuzzy actor match operation.

    Attributes:
        match: The matched actor name, or None if no single match was found.
        is_exact: True if the match was exact (ignoring case).
        score: The fuzzy match score (0-100), or 100 for exact match.
        suggestions: Close actor names when no single match was found.
    """

    match: str | None = None
    is_exact: bool = False
    score: float = 0.0
    suggestions: list[str] = field(default_factory=list)


def fuzzy_find_actor(
    graph: Graph[str, Titles],
    query: str,
    threshold: int = ACTOR_MATCH_THRESHOLD,
) -> MatchResult:
    """Find an actor by exact or fuzzy name match.

    Tries an exact match, then a case-insensitive one, then fuzzy matching
    above the threshold. A fuzzy match is only returned when it clearly
    beats the runner-up; otherwise the close names are returned as
    suggestions.

    Args:
        graph: The co-star graph to search.
        query: The name typed by the user.
        threshold: Minimum fuzzy match score (0-100).

    Returns:
        MatchResult with the matched name or suggestions.
    """
    if graph.has_vertex(query):
        return MatchResult(match=query, is_exact=True, score=100.0)

    actors = graph.vertices()
    if not actors:
        return MatchResult()

    query_lower = query.lower()
    for actor in actors:
        if actor.lower() == query_lower:
            return MatchResult(match=actor, is_exact=True, score=100.0)

    matches = process.extract(
        query,
        actors,
        scorer=fuzz.WRatio,
        score_cutoff=threshold,
        limit=MAX_SUGGESTIONS,
    )

    if not matches:
        return MatchResult(match=None, suggestions=[])

    top_name, top_score, _ = matches[0]
    close = [name for name, score, _ in matches if score >= top_score - 10]

    if len(close) > 1:
        return MatchResult(match=None, score=top_score, suggestions=close)

    return MatchResult(match=top_name, is_exact=False, score=top_score, suggestions=[top_name])


def format_actor_suggestions(suggestions: list[str]) -> str:
    """Format actor suggestions for display.

    Args:
        suggestions: List of suggested actor names.

    Returns:
        Formatted string with "Did you mean" header.
    """
    if not suggestions:
        return ""

    lines = ["Did you mean:"]
    for name in suggestions:
        lines.append(f"  - {name}")
    return "\n".join(lines)
