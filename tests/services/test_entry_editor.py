"""Unit tests for EntryEditor."""

from datetime import date

import pytest

from tbr_tracker.core import EntryDraft, TBRItem
from tbr_tracker.services import EntryEditor, EntryForm, PlaceholderImageService, parse_rating


@pytest.fixture
def editor():
    return EntryEditor(placeholders=PlaceholderImageService())


@pytest.fixture
def existing_item():
    return TBRItem.from_draft(
        "42",
        date(2024, 2, 2),
        EntryDraft(
            title="One Piece",
            category="Manga",
            status="Reading",
            image="https://img/op.jpg",
            gallery=("https://img/op-a.jpg", "https://img/op-b.jpg"),
            genre=("Adventure",),
            rating=4.9,
            notes="Arc 10",
        ),
    )


def fill(form: EntryForm, **values) -> EntryForm:
    for name, value in values.items():
        setattr(form, name, value)
    return form


class TestParseRating:
    """Tests for rating text parsing."""

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "4,5", "nan", "inf"])
    def test_unusable_text_means_unrated(self, raw):
        assert parse_rating(raw) is None

    def test_numbers_are_parsed(self):
        assert parse_rating("4.5") == 4.5
        assert parse_rating(" 3 ") == 3.0
        assert parse_rating("0") == 0.0


class TestDialogState:
    """Tests for the open/closed state machine."""

    def test_starts_closed(self, editor):
        assert not editor.is_open
        assert editor.edit_target is None

    def test_open_blank(self, editor):
        form = editor.open_blank()
        assert editor.is_open
        assert not editor.is_editing
        assert form == EntryForm()

    def test_open_for_edit_prefills(self, editor, existing_item):
        form = editor.open_for_edit(existing_item)
        assert editor.is_editing
        assert editor.edit_target == existing_item
        assert form.title == "One Piece"
        assert form.rating == "4.9"

    @pytest.mark.parametrize("close", ["cancel", "dismiss"])
    def test_every_close_clears_edit_target(self, editor, existing_item, close):
        editor.open_for_edit(existing_item)

        getattr(editor, close)()

        assert not editor.is_open
        assert editor.edit_target is None
        assert editor.open_blank() == EntryForm()

    def test_successful_submit_closes_and_clears_target(self, editor, existing_item):
        editor.open_for_edit(existing_item)

        assert editor.submit() is not None
        assert not editor.is_open
        assert editor.edit_target is None

    def test_submit_while_closed_does_nothing(self, editor):
        assert editor.submit() is None


class TestValidation:
    """Tests for required fields and rating range."""

    @pytest.mark.parametrize(
        "values",
        [
            {"title": "", "category": "Book", "status": "TBR"},
            {"title": "   ", "category": "Book", "status": "TBR"},
            {"title": "Dune", "category": "", "status": "TBR"},
            {"title": "Dune", "category": "Book", "status": ""},
            {"title": "Dune", "category": "Movie", "status": "TBR"},
            {"title": "Dune", "category": "Book", "status": "TBR", "rating": "5.1"},
            {"title": "Dune", "category": "Book", "status": "TBR", "rating": "-1"},
        ],
    )
    def test_invalid_submission_is_rejected_and_dialog_stays_open(self, editor, values):
        fill(editor.open_blank(), **values)

        assert editor.submit() is None
        assert editor.is_open
        assert editor.form.title == values["title"]

    def test_malformed_rating_does_not_block_submit(self, editor):
        fill(editor.open_blank(), title="Dune", category="Book", status="TBR", rating="great")

        submission = editor.submit()

        assert submission is not None
        assert submission.draft.rating is None

    def test_boundary_ratings_are_accepted(self, editor):
        for raw in ("0", "5"):
            fill(editor.open_blank(), title="Dune", category="Book", status="TBR", rating=raw)
            assert editor.submit().draft.rating == float(raw)


class TestNormalization:
    """Tests for draft synthesis."""

    def test_new_entry_gets_placeholders(self, editor):
        fill(editor.open_blank(), title="Dune", category="Book", status="TBR")

        submission = editor.submit()

        assert submission.is_new
        draft = submission.draft
        assert draft.title == "Dune"
        assert "dune" in draft.image
        assert len(draft.gallery) == 2
        assert draft.gallery[0] != draft.gallery[1]
        assert draft.rating is None
        assert draft.notes is None
        assert draft.genre == ()

    def test_title_is_trimmed_and_slug_has_no_whitespace(self, editor):
        fill(editor.open_blank(), title="  Dragon Ball  ", category="Anime", status="Watching")

        draft = editor.submit().draft

        assert draft.title == "Dragon Ball"
        assert "dragonball" in draft.image

    def test_user_image_is_kept(self, editor):
        fill(editor.open_blank(), title="Dune", category="Book", status="TBR",
             image="https://img/dune.png")

        assert editor.submit().draft.image == "https://img/dune.png"

    def test_genres_and_notes_carry_over(self, editor):
        form = fill(editor.open_blank(), title="Dune", category="Book", status="TBR",
                    notes="Borrowed from Ana", rating="4.2")
        form.add_genre("Sci-Fi")
        form.add_genre("Sci-Fi")

        draft = editor.submit().draft

        assert draft.genre == ("Sci-Fi",)
        assert draft.notes == "Borrowed from Ana"
        assert draft.rating == 4.2

    def test_duplicate_genres_set_directly_are_collapsed(self, editor):
        fill(editor.open_blank(), title="Dune", category="Book", status="TBR",
             genres=["Sci-Fi", " Sci-Fi", ""])

        assert editor.submit().draft.genre == ("Sci-Fi",)

    def test_edit_submission_targets_existing_id(self, editor, existing_item):
        editor.open_for_edit(existing_item).status = "Completed"

        submission = editor.submit()

        assert submission.item_id == "42"
        assert not submission.is_new
        assert submission.draft.status == "Completed"
        assert submission.draft.image == "https://img/op.jpg"

    def test_edit_keeps_existing_gallery_by_default(self, editor, existing_item):
        editor.open_for_edit(existing_item).title = "One Piece Color"

        draft = editor.submit().draft

        assert draft.gallery == existing_item.gallery

    def test_edit_regenerates_gallery_when_configured(self, existing_item):
        editor = EntryEditor(PlaceholderImageService(), regenerate_gallery=True)
        editor.open_for_edit(existing_item).title = "One Piece Color"

        draft = editor.submit().draft

        assert draft.gallery == PlaceholderImageService().gallery_for("One Piece Color")

    def test_edit_without_gallery_gets_placeholders(self, editor):
        bare = TBRItem.from_draft("1", date(2024, 1, 1), EntryDraft("Monster", "Manga", "TBR"))
        editor.open_for_edit(bare)

        assert len(editor.submit().draft.gallery) == 2


def test_editor_requires_placeholder_service():
    with pytest.raises(ValueError, match="PlaceholderImageService must not be None"):
        EntryEditor(placeholders=None)
