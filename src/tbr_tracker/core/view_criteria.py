"""Value objects describing what the collection screen should show."""

from dataclasses import dataclass
from typing import Tuple

from .tbr_item import CATEGORIES, STATUSES, TBRItem

ALL = "all"


@dataclass(frozen=True)
class ViewCriteria:
    """Search query plus status and category filters.

    A filter value of "all" disables that filter.
    """

    query: str = ""
    status_filter: str = ALL
    category_filter: str = ALL

    def __post_init__(self):
        if self.status_filter != ALL and self.status_filter not in STATUSES:
            raise ValueError(f"Unknown status filter: {self.status_filter}")
        if self.category_filter != ALL and self.category_filter not in CATEGORIES:
            raise ValueError(f"Unknown category filter: {self.category_filter}")

    @property
    def has_active_filters(self) -> bool:
        return (
            self.status_filter != ALL
            or self.category_filter != ALL
            or len(self.query) > 0
        )

    @classmethod
    def cleared(cls) -> "ViewCriteria":
        return cls()


@dataclass(frozen=True)
class CollectionStats:
    """Aggregate counts over the whole collection, ignoring filters."""

    total: int = 0
    completed: int = 0
    in_progress: int = 0
    tbr: int = 0


@dataclass(frozen=True)
class CollectionView:
    """Filtered entries together with collection-wide statistics."""

    items: Tuple[TBRItem, ...]
    stats: CollectionStats
    criteria: ViewCriteria = ViewCriteria()

    @property
    def shown_count(self) -> int:
        return len(self.items)

    @property
    def total_count(self) -> int:
        return self.stats.total

    @property
    def is_collection_empty(self) -> bool:
        """True when nothing is tracked at all (as opposed to filtered out)."""
        return self.stats.total == 0
