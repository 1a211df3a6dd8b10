#!/usr/bin/env python3
"""
Integration tests for the collection screen - full workflow validation.

Tests the complete user journey with real widgets:
1. Start with an empty list
2. Add an entry through the dialog
3. Edit the entry
4. Search and filter
5. Delete the entry
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from PySide6.QtWidgets import QApplication

from tbr_tracker.coordinators import CollectionCoordinator
from tbr_tracker.io import CollectionStore
from tbr_tracker.services import EntryEditor, PlaceholderImageService
from tbr_tracker.ui import CollectionScreen, EntryFormDialog

TODAY = date(2026, 10, 19)


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def app_parts():
    """Wire real widgets, store and editor through the coordinator."""
    ensure_qt_app()
    screen = CollectionScreen()
    dialog = EntryFormDialog()
    store = CollectionStore(today=lambda: TODAY)
    editor = EntryEditor(PlaceholderImageService())
    coordinator = CollectionCoordinator(
        collection_screen=screen,
        entry_dialog=dialog,
        store=store,
        editor=editor,
        main_window=MagicMock(),
    )
    coordinator.show_collection()
    yield screen, dialog, store, editor, coordinator
    dialog.close_dialog()


def fill_dialog(dialog, title, category, status, rating=""):
    dialog.title_edit.setText(title)
    dialog.category_combo.setCurrentText(category)
    dialog.status_combo.setCurrentText(status)
    dialog.rating_edit.setText(rating)


def test_full_workflow(app_parts):
    screen, dialog, store, editor, coordinator = app_parts
    assert screen.empty_label.text().startswith("No entries yet")

    # Add "Dune" through the empty-state button
    screen.add_first_button.click()
    assert editor.is_open
    fill_dialog(dialog, "Dune", "Book", "TBR")
    dialog.new_genre_edit.setText("Sci-Fi")
    dialog.add_genre_button.click()
    dialog.submit_button.click()

    assert len(store) == 1
    dune = store.items[0]
    assert dune.title == "Dune"
    assert "dune" in dune.image
    assert len(dune.gallery) == 2
    assert dune.rating is None
    assert dune.genre == ("Sci-Fi",)
    assert dune.date_added == TODAY
    assert not editor.is_open
    assert [card.item.id for card in screen.cards] == [dune.id]

    # Edit it: the dialog comes up prefilled
    screen.cards[0].edit_button.click()
    assert dialog.title_edit.text() == "Dune"
    assert dialog.genres == ["Sci-Fi"]
    dialog.status_combo.setCurrentText("Reading")
    dialog.rating_edit.setText("4.5")
    dialog.submit_button.click()

    updated = store.get(dune.id)
    assert updated.status == "Reading"
    assert updated.rating == 4.5
    assert updated.date_added == dune.date_added
    assert screen.stat_labels["in_progress"].text() == "1"

    # Search and filter
    screen.filter_bar.search_edit.setText("drag")
    assert screen.cards == []
    assert screen.results_label.text() == "Showing 0 of 1 entries"
    screen.filter_bar.clear_button.click()
    assert screen.filter_bar.search_edit.text() == ""
    assert len(screen.cards) == 1

    # Delete after confirming
    with patch("tbr_tracker.ui.collection_screen.QMessageBox") as MockBox:
        MockBox.question.return_value = MockBox.Yes
        screen.cards[0].delete_button.click()

    assert len(store) == 0
    assert screen.empty_label.text().startswith("No entries yet")


def test_rejected_submission_keeps_dialog_input(app_parts):
    screen, dialog, store, editor, coordinator = app_parts

    coordinator.handle_add_requested()
    fill_dialog(dialog, "", "Book", "TBR")
    dialog.submit_button.click()

    assert len(store) == 0
    assert editor.is_open
    assert dialog.category_combo.currentText() == "Book"


def test_cancel_then_add_starts_blank(app_parts):
    screen, dialog, store, editor, coordinator = app_parts
    coordinator.handle_add_requested()
    fill_dialog(dialog, "Monster", "Manga", "Completed")
    dialog.submit_button.click()

    screen.cards[0].edit_button.click()
    dialog.cancel_button.click()
    assert editor.edit_target is None

    coordinator.handle_add_requested()
    assert dialog.title_edit.text() == ""
    assert dialog.windowTitle() == "Add New Entry"


def test_declined_delete_keeps_entry(app_parts):
    screen, dialog, store, editor, coordinator = app_parts
    coordinator.handle_add_requested()
    fill_dialog(dialog, "Monster", "Manga", "Completed")
    dialog.submit_button.click()

    with patch("tbr_tracker.ui.collection_screen.QMessageBox") as MockBox:
        MockBox.question.return_value = MockBox.No
        screen.cards[0].delete_button.click()

    assert len(store) == 1
