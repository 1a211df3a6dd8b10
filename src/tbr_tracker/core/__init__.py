"""Domain layer - Pure entities representing tracked media entries."""

from .tbr_item import (
    CATEGORIES,
    IN_PROGRESS_STATUSES,
    MAX_RATING,
    MIN_RATING,
    STATUSES,
    Category,
    EntryDraft,
    Status,
    TBRItem,
    is_rating_in_range,
)
from .view_criteria import ALL, CollectionStats, CollectionView, ViewCriteria

__all__ = [
    "TBRItem",
    "EntryDraft",
    "Status",
    "Category",
    "STATUSES",
    "CATEGORIES",
    "IN_PROGRESS_STATUSES",
    "MIN_RATING",
    "MAX_RATING",
    "is_rating_in_range",
    "ALL",
    "ViewCriteria",
    "CollectionStats",
    "CollectionView",
]
