"""View Filter - derives the visible entries and collection statistics.

Every function here is pure: the same collection and criteria always give
the same result. The coordinator calls derive_view() after each mutation or
criteria change instead of patching a previous result.
"""

from typing import Iterable, Sequence, Tuple

from tbr_tracker.core import (
    ALL,
    CollectionStats,
    CollectionView,
    IN_PROGRESS_STATUSES,
    TBRItem,
    ViewCriteria,
)


def matches_query(item: TBRItem, query: str) -> bool:
    """Case-insensitive substring match on title, genres and notes."""
    if not query:
        return True

    needle = query.lower()
    if needle in item.title.lower():
        return True
    if any(needle in genre.lower() for genre in item.genre):
        return True
    return bool(item.notes) and needle in item.notes.lower()


def matches_criteria(item: TBRItem, criteria: ViewCriteria) -> bool:
    """Apply query, status and category conjunctively."""
    matches_status = criteria.status_filter == ALL or item.status == criteria.status_filter
    matches_category = (
        criteria.category_filter == ALL or item.category == criteria.category_filter
    )
    return matches_query(item, criteria.query) and matches_status and matches_category


def filter_items(items: Iterable[TBRItem], criteria: ViewCriteria) -> Tuple[TBRItem, ...]:
    """Return the matching entries in their original order."""
    return tuple(item for item in items if matches_criteria(item, criteria))


def compute_stats(items: Sequence[TBRItem]) -> CollectionStats:
    return CollectionStats(
        total=len(items),
        completed=sum(1 for item in items if item.status == "Completed"),
        in_progress=sum(1 for item in items if item.status in IN_PROGRESS_STATUSES),
        tbr=sum(1 for item in items if item.status == "TBR"),
    )


def derive_view(items: Sequence[TBRItem], criteria: ViewCriteria) -> CollectionView:
    """Filtered entries plus statistics over the full collection."""
    return CollectionView(
        items=filter_items(items, criteria),
        stats=compute_stats(items),
        criteria=criteria,
    )
