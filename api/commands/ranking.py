"""
Relevance ranking for free-text command search.

Each candidate is scored by the first matching tier below; results are
ordered by score descending, then name ascending. Matching is a literal
substring/prefix test using SQLite's LIKE (ASCII case-insensitive), except the
exact-name tier, which uses `=` and is case-sensitive.
"""

from __future__ import annotations

from dataclasses import dataclass

from core import errors, settings

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class RelevanceTier:
    name: str
    score: int
    # SQL predicate using the :exact, :prefix and :contains parameters.
    predicate: str


RELEVANCE_TIERS: tuple[RelevanceTier, ...] = (
    RelevanceTier("exact name match", 100, "name = :exact"),
    RelevanceTier("name prefix match", 50, "name LIKE :prefix ESCAPE '\\'"),
    RelevanceTier("name substring match", 30, "name LIKE :contains ESCAPE '\\'"),
    RelevanceTier("description prefix match", 20, "description LIKE :prefix ESCAPE '\\'"),
    RelevanceTier("description substring match", 10, "description LIKE :contains ESCAPE '\\'"),
)

CANDIDATE_PREDICATE = (
    "(name LIKE :contains ESCAPE '\\' OR description LIKE :contains ESCAPE '\\')"
)


def relevance_case_sql() -> str:
    """
    Build the CASE expression that scores a Command row by tier precedence.
    """
    whens = "\n".join(f"    WHEN {tier.predicate} THEN {tier.score}" for tier in RELEVANCE_TIERS)
    return f"CASE\n{whens}\n    ELSE 0\nEND"


def tier_for_score(score: int) -> RelevanceTier | None:
    for tier in RELEVANCE_TIERS:
        if tier.score == score:
            return tier
    return None


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def search_terms(query: str) -> dict[str, str]:
    """
    Bind parameters for a trimmed query: exact, prefix and substring forms.
    """
    escaped = escape_like(query)
    return {
        "exact": query,
        "prefix": f"{escaped}%",
        "contains": f"%{escaped}%",
    }


def normalize_query(q: str | None) -> str:
    query = (q or "").strip()
    if not query:
        raise errors.InvalidInput("Search query cannot be empty")
    return query


def effective_limit(limit: int | None) -> int:
    """
    Apply the default when no limit is given and clamp to the hard cap.
    A limit of 0 yields an empty result.
    """
    if limit is None:
        return min(settings.search_default_limit(), settings.search_max_limit())
    if limit < 0:
        raise errors.InvalidInput(f"Search limit must not be negative, got {limit}")
    return min(limit, settings.search_max_limit())
