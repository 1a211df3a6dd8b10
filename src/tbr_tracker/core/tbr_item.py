"""Domain entities for tracked media entries."""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional, Tuple

Status = Literal["TBR", "Reading", "Watching", "Completed"]
Category = Literal["Book", "Anime", "Manga"]

STATUSES: Tuple[str, ...] = ("TBR", "Reading", "Watching", "Completed")
CATEGORIES: Tuple[str, ...] = ("Book", "Anime", "Manga")
IN_PROGRESS_STATUSES: Tuple[str, ...] = ("Reading", "Watching")

MIN_RATING = 0.0
MAX_RATING = 5.0


def is_rating_in_range(rating: float) -> bool:
    return MIN_RATING <= rating <= MAX_RATING


@dataclass(frozen=True)
class EntryDraft:
    """Entry payload without the store-assigned id and creation date.

    Attributes:
        title: Display title.
        category: One of CATEGORIES.
        status: One of STATUSES.
        image: Primary cover image reference.
        gallery: Secondary image references.
        genre: Ordered genre labels without duplicates.
        rating: Score in [0, 5], or None when not rated yet.
        notes: Free-text notes, or None.
    """

    title: str
    category: Category
    status: Status
    image: str = ""
    gallery: Tuple[str, ...] = field(default_factory=tuple)
    genre: Tuple[str, ...] = field(default_factory=tuple)
    rating: Optional[float] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class TBRItem:
    """A tracked book, anime or manga in the collection.

    Attributes:
        id: Unique identifier, never reassigned.
        title: Display title.
        image: Primary cover image reference.
        gallery: Secondary image references.
        genre: Ordered genre labels without duplicates.
        rating: Score in [0, 5], or None when not rated yet.
        status: One of STATUSES.
        category: One of CATEGORIES.
        notes: Free-text notes, or None.
        date_added: Day the entry was created.
    """

    id: str
    title: str
    image: str
    gallery: Tuple[str, ...]
    genre: Tuple[str, ...]
    rating: Optional[float]
    status: Status
    category: Category
    notes: Optional[str]
    date_added: date

    @classmethod
    def from_draft(cls, item_id: str, date_added: date, draft: EntryDraft) -> "TBRItem":
        """Attach an identity and creation date to a draft."""
        return cls(
            id=item_id,
            title=draft.title,
            image=draft.image,
            gallery=tuple(draft.gallery),
            genre=tuple(draft.genre),
            rating=draft.rating,
            status=draft.status,
            category=draft.category,
            notes=draft.notes,
            date_added=date_added,
        )

    def with_draft(self, draft: EntryDraft) -> "TBRItem":
        """Return a copy with every mutable field taken from draft.

        The id and date_added of this item are kept whatever the draft holds.
        """
        return TBRItem.from_draft(self.id, self.date_added, draft)

    def to_draft(self) -> EntryDraft:
        return EntryDraft(
            title=self.title,
            category=self.category,
            status=self.status,
            image=self.image,
            gallery=self.gallery,
            genre=self.genre,
            rating=self.rating,
            notes=self.notes,
        )

    @property
    def is_in_progress(self) -> bool:
        return self.status in IN_PROGRESS_STATUSES

    def validate(self) -> None:
        """Check the entry invariants.

        Raises:
            ValueError: If id or title is empty, status/category is unknown,
                rating is out of range, or genre holds duplicates.
        """
        if not self.id:
            raise ValueError("Entry id must not be empty")
        if not self.title or not self.title.strip():
            raise ValueError(f"Entry {self.id} has an empty title")
        if self.status not in STATUSES:
            raise ValueError(f"Unknown status for entry {self.id}: {self.status!r}")
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown category for entry {self.id}: {self.category!r}")
        if self.rating is not None and not is_rating_in_range(self.rating):
            raise ValueError(
                f"Rating {self.rating} for entry {self.id} is outside "
                f"[{MIN_RATING:g}, {MAX_RATING:g}]"
            )
        stripped = [label.strip() for label in self.genre]
        if len(set(stripped)) != len(stripped):
            raise ValueError(f"Entry {self.id} has duplicate genres: {list(self.genre)}")
