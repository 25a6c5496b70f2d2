"""Ordering of café and city lists for display.

Python's sorted() is stable, also with reverse=True, so records that tie on
every key keep their input order.
"""

from typing import Any, Iterable, List, Mapping, Sequence, Tuple

COLLAPSED_LIMIT = 10


def _number(record: Any, name: str) -> float:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def primary_key(record: Any) -> float:
    """Work score, missing treated as 0."""
    return _number(record, "work_score")


def expanded_key(record: Any) -> Tuple[float, float, float]:
    """Rating, then rating count, then work score; missing treated as 0."""
    return (
        _number(record, "google_rating"),
        _number(record, "google_ratings_total"),
        _number(record, "work_score"),
    )


def rank_by_work_score(cafes: Iterable[Any]) -> List[Any]:
    return sorted(cafes, key=primary_key, reverse=True)


def rank_by_rating(cafes: Iterable[Any]) -> List[Any]:
    return sorted(cafes, key=expanded_key, reverse=True)


def visible_cafes(cafes: Sequence[Any], expanded: bool = False) -> List[Any]:
    """Select the cafés to display for a city list.

    Args:
        cafes: Fetched café records.
        expanded: Whether the user asked for the full list.

    Returns:
        The full list in rating order when expanded, otherwise the top 10
        by work score.
    """
    if expanded:
        return rank_by_rating(cafes)
    return rank_by_work_score(cafes)[:COLLAPSED_LIMIT]


def rank_cities(counts: Mapping[str, int], limit: int = 10) -> List[Tuple[str, int]]:
    """Order cities by café count (desc), then by name (asc).

    Args:
        counts: City name -> number of active cafés.
        limit: Maximum number of cities returned.

    Returns:
        List of (city, count) pairs.
    """
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ordered[:limit]
