"""Raw form state for the add/edit entry dialog."""

from dataclasses import dataclass, field
from typing import List, Optional

from tbr_tracker.core import TBRItem


@dataclass
class EntryForm:
    """Field values exactly as the user typed them.

    Category and status are empty strings until the user picks one, and the
    rating stays text so an empty box can mean "not rated".
    """

    title: str = ""
    category: str = ""
    status: str = ""
    image: str = ""
    notes: str = ""
    rating: str = ""
    genres: List[str] = field(default_factory=list)
    new_genre: str = ""

    @classmethod
    def from_item(cls, item: TBRItem) -> "EntryForm":
        """Prefill every editable field from an existing entry."""
        return cls(
            title=item.title,
            category=item.category,
            status=item.status,
            image=item.image,
            notes=item.notes or "",
            rating=f"{item.rating:g}" if item.rating is not None else "",
            genres=list(item.genre),
        )

    def add_genre(self, label: Optional[str] = None) -> bool:
        """Append a genre unless it is blank or already listed.

        Args:
            label: Genre to add; defaults to the pending new_genre text.

        Returns:
            True if the genre was appended.
        """
        candidate = (self.new_genre if label is None else label).strip()
        if not candidate or candidate in self.genres:
            return False

        self.genres.append(candidate)
        self.new_genre = ""
        return True

    def remove_genre(self, label: str) -> bool:
        if label not in self.genres:
            return False
        self.genres.remove(label)
        return True
