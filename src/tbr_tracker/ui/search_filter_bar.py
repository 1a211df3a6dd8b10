"""Search and filter bar above the entry list."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tbr_tracker.core import ALL, CATEGORIES, STATUSES, ViewCriteria


class SearchFilterBar(QWidget):
    """Query box plus status and category filters.

    Signals:
        query_changed: Emitted with the new search text.
        status_filter_changed: Emitted with "all" or a status.
        category_filter_changed: Emitted with "all" or a category.
        clear_requested: Emitted when Clear Filters is clicked.
    """

    query_changed = Signal(str)
    status_filter_changed = Signal(str)
    category_filter_changed = Signal(str)
    clear_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self.set_criteria(ViewCriteria())

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search titles...")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self.query_changed.emit)
        layout.addWidget(self.search_edit)

        row = QHBoxLayout()
        self.status_combo = QComboBox()
        self.status_combo.addItem("All Status", ALL)
        for status in STATUSES:
            self.status_combo.addItem(status, status)
        self.status_combo.currentIndexChanged.connect(self._on_status_index_changed)
        row.addWidget(self.status_combo)

        self.category_combo = QComboBox()
        self.category_combo.addItem("All Categories", ALL)
        for category in CATEGORIES:
            self.category_combo.addItem(category, category)
        self.category_combo.currentIndexChanged.connect(self._on_category_index_changed)
        row.addWidget(self.category_combo)
        row.addStretch()

        self.clear_button = QPushButton("Clear Filters")
        self.clear_button.clicked.connect(self.clear_requested.emit)
        row.addWidget(self.clear_button)
        layout.addLayout(row)

        self.active_filters_label = QLabel()
        self.active_filters_label.setStyleSheet("QLabel { color: #aaa; font-size: 12px; }")
        layout.addWidget(self.active_filters_label)

    def set_criteria(self, criteria: ViewCriteria):
        """Show the given criteria without re-emitting change signals."""
        for widget in (self.search_edit, self.status_combo, self.category_combo):
            widget.blockSignals(True)
        try:
            if self.search_edit.text() != criteria.query:
                self.search_edit.setText(criteria.query)
            self.status_combo.setCurrentIndex(self.status_combo.findData(criteria.status_filter))
            self.category_combo.setCurrentIndex(
                self.category_combo.findData(criteria.category_filter)
            )
        finally:
            for widget in (self.search_edit, self.status_combo, self.category_combo):
                widget.blockSignals(False)
        self.update_active_filters(criteria)

    def update_active_filters(self, criteria: ViewCriteria):
        """Show the clear button and the summary only while a filter is active."""
        active = criteria.has_active_filters
        self.clear_button.setVisible(active)
        self.active_filters_label.setVisible(active)

        parts = []
        if criteria.query:
            parts.append(f"Search: {criteria.query}")
        if criteria.status_filter != ALL:
            parts.append(f"Status: {criteria.status_filter}")
        if criteria.category_filter != ALL:
            parts.append(f"Category: {criteria.category_filter}")
        self.active_filters_label.setText("   ".join(parts))

    def _on_status_index_changed(self, index: int):
        self.status_filter_changed.emit(self.status_combo.itemData(index))

    def _on_category_index_changed(self, index: int):
        self.category_filter_changed.emit(self.category_combo.itemData(index))
