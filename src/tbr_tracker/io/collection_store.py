"""In-memory store for the tracked entry collection."""

import time
from datetime import date
from typing import Callable, Iterable, List, Optional, Tuple

from tbr_tracker.core import EntryDraft, TBRItem
from tbr_tracker.utils import get_logger

logger = get_logger(__name__)


class CollectionStore:
    """Owns the ordered collection of entries, most recent first.

    This is the only place identifiers and creation dates are assigned.
    Update and delete on an unknown id are silent no-ops: they return
    None/False instead of raising, since a stale reference is not an
    error for a single-user session.
    """

    def __init__(
        self,
        seed_items: Optional[Iterable[TBRItem]] = None,
        today: Callable[[], date] = date.today,
        clock_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        """Initialize the store.

        Args:
            seed_items: Initial entries in display order.
            today: Returns the creation date for new entries.
            clock_ms: Returns the millisecond timestamp new ids derive from.

        Raises:
            ValueError: If a seed entry breaks an invariant or ids collide.
        """
        self._today = today
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._items: List[TBRItem] = []
        # Highest id handed out or seeded; ids are never reassigned
        self._last_id = 0

        for item in seed_items or ():
            item.validate()
            if self._index_of(item.id) is not None:
                raise ValueError(f"Duplicate entry id in seed data: {item.id}")
            if item.id.isdigit():
                self._last_id = max(self._last_id, int(item.id))
            self._items.append(item)

    @property
    def items(self) -> Tuple[TBRItem, ...]:
        """Snapshot of the current collection in display order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self._index_of(item_id) is not None

    def get(self, item_id: str) -> Optional[TBRItem]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def create(self, draft: EntryDraft) -> TBRItem:
        """Add a new entry at the front of the collection.

        Args:
            draft: Entry fields without id and date_added.

        Returns:
            TBRItem: The stored entry with its assigned id and date.
        """
        item = TBRItem.from_draft(self._next_id(), self._today(), draft)
        self._items.insert(0, item)
        logger.info("Created entry %s (%r)", item.id, item.title)
        return item

    def update(self, item_id: str, draft: EntryDraft) -> Optional[TBRItem]:
        """Replace every field of an entry except its id and date_added.

        The entry keeps its position in the collection.

        Returns:
            The updated entry, or None if no entry has that id.
        """
        index = self._index_of(item_id)
        if index is None:
            logger.debug("Update skipped, entry %s not found", item_id)
            return None

        updated = self._items[index].with_draft(draft)
        self._items[index] = updated
        logger.info("Updated entry %s (%r)", item_id, updated.title)
        return updated

    def delete(self, item_id: str) -> bool:
        """Remove an entry.

        Returns:
            True if an entry was removed, False if the id was unknown.
        """
        index = self._index_of(item_id)
        if index is None:
            logger.debug("Delete skipped, entry %s not found", item_id)
            return False

        removed = self._items.pop(index)
        logger.info("Deleted entry %s (%r)", removed.id, removed.title)
        return True

    def _next_id(self) -> str:
        candidate = max(self._clock_ms(), self._last_id + 1)
        while self._index_of(str(candidate)) is not None:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def _index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None
