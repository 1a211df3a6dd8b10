"""Tests for SearchFilterBar."""

from PySide6.QtWidgets import QApplication

from tbr_tracker.core import ViewCriteria
from tbr_tracker.ui import SearchFilterBar


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_filter_bar_emits_changes():
    ensure_qt_app()

    bar = SearchFilterBar()
    queries, statuses, categories = [], [], []
    bar.query_changed.connect(queries.append)
    bar.status_filter_changed.connect(statuses.append)
    bar.category_filter_changed.connect(categories.append)

    bar.search_edit.setText("drag")
    bar.status_combo.setCurrentIndex(bar.status_combo.findData("Reading"))
    bar.category_combo.setCurrentIndex(bar.category_combo.findData("Manga"))

    assert queries == ["drag"]
    assert statuses == ["Reading"]
    assert categories == ["Manga"]


def test_clear_controls_hidden_without_active_filters():
    ensure_qt_app()

    bar = SearchFilterBar()

    assert bar.clear_button.isHidden()
    assert bar.active_filters_label.isHidden()


def test_active_filters_summary():
    ensure_qt_app()

    bar = SearchFilterBar()
    bar.update_active_filters(ViewCriteria(query="dune", category_filter="Book"))

    assert not bar.clear_button.isHidden()
    assert bar.active_filters_label.text() == "Search: dune   Category: Book"


def test_set_criteria_does_not_emit():
    ensure_qt_app()

    bar = SearchFilterBar()
    emitted = []
    bar.query_changed.connect(emitted.append)
    bar.status_filter_changed.connect(emitted.append)

    bar.set_criteria(ViewCriteria(query="x", status_filter="TBR"))
    bar.set_criteria(ViewCriteria())

    assert emitted == []
    assert bar.search_edit.text() == ""
    assert bar.status_combo.currentData() == "all"


def test_clear_button_emits_clear_requested():
    ensure_qt_app()

    bar = SearchFilterBar()
    cleared = []
    bar.clear_requested.connect(lambda: cleared.append(True))

    bar.clear_button.click()

    assert cleared == [True]
