"""Entry Editor - validates form input and turns it into entry drafts."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from tbr_tracker.core import CATEGORIES, STATUSES, EntryDraft, TBRItem, is_rating_in_range
from tbr_tracker.services.entry_form import EntryForm
from tbr_tracker.services.placeholder_images import PlaceholderImageService
from tbr_tracker.utils import get_logger

logger = get_logger(__name__)


def parse_rating(raw: str) -> Optional[float]:
    """Parse rating text; empty, malformed or non-finite input means no rating."""
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class EditorSubmission:
    """An accepted form submission.

    Attributes:
        item_id: Entry being edited, or None when adding a new one.
        draft: Normalized entry fields.
    """

    item_id: Optional[str]
    draft: EntryDraft

    @property
    def is_new(self) -> bool:
        return self.item_id is None


class EntryEditor:
    """Drives the add/edit dialog.

    States: closed, open with a blank form, open prefilled from an entry.
    Every way of closing (cancel, dismiss, successful submit) forgets the
    edit target so the next add starts blank.
    """

    def __init__(
        self,
        placeholders: PlaceholderImageService,
        regenerate_gallery: bool = False,
    ) -> None:
        if placeholders is None:
            raise ValueError("PlaceholderImageService must not be None")

        self._placeholders = placeholders
        self._regenerate_gallery = regenerate_gallery
        self._is_open = False
        self._edit_target: Optional[TBRItem] = None
        self.form = EntryForm()

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def edit_target(self) -> Optional[TBRItem]:
        return self._edit_target

    @property
    def is_editing(self) -> bool:
        return self._is_open and self._edit_target is not None

    def open_blank(self) -> EntryForm:
        self._edit_target = None
        self.form = EntryForm()
        self._is_open = True
        return self.form

    def open_for_edit(self, item: TBRItem) -> EntryForm:
        self._edit_target = item
        self.form = EntryForm.from_item(item)
        self._is_open = True
        return self.form

    def cancel(self) -> None:
        self._close()

    def dismiss(self) -> None:
        """Close after the dialog was dismissed from outside (Escape, window close)."""
        self._close()

    def is_valid(self, form: Optional[EntryForm] = None) -> bool:
        """Check required fields and the rating range.

        Title must be non-blank, category and status must be known values,
        and a parseable rating must lie in [0, 5].
        """
        form = form or self.form
        if not form.title.strip():
            return False
        if form.category not in CATEGORIES or form.status not in STATUSES:
            return False
        rating = parse_rating(form.rating)
        return rating is None or is_rating_in_range(rating)

    def build_draft(self, form: Optional[EntryForm] = None) -> Optional[EntryDraft]:
        """Normalize a valid form into a draft, or return None if invalid."""
        form = form or self.form
        if not self.is_valid(form):
            return None

        title = form.title.strip()
        image = form.image.strip() or self._placeholders.cover_for(title)

        return EntryDraft(
            title=title,
            category=form.category,
            status=form.status,
            image=image,
            gallery=self._gallery_for(title),
            genre=tuple(dict.fromkeys(g.strip() for g in form.genres if g.strip())),
            rating=parse_rating(form.rating),
            notes=form.notes.strip() or None,
        )

    def submit(self) -> Optional[EditorSubmission]:
        """Accept the current form.

        Returns:
            The submission to apply to the store, or None when the dialog is
            closed or the form is invalid. An invalid form leaves the dialog
            open with its input untouched.
        """
        if not self._is_open:
            return None

        draft = self.build_draft()
        if draft is None:
            logger.debug("Submission rejected, required fields missing or rating out of range")
            return None

        item_id = self._edit_target.id if self._edit_target is not None else None
        self._close()
        return EditorSubmission(item_id=item_id, draft=draft)

    def _gallery_for(self, title: str) -> Tuple[str, ...]:
        target = self._edit_target
        if target is not None and target.gallery and not self._regenerate_gallery:
            return target.gallery
        return self._placeholders.gallery_for(title)

    def _close(self) -> None:
        self._is_open = False
        self._edit_target = None
