"""Collection screen - statistics, filters and the list of tracked entries."""

from typing import Dict, List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from tbr_tracker.core import CollectionView
from tbr_tracker.ui.entry_card import EntryCard
from tbr_tracker.ui.search_filter_bar import SearchFilterBar

EMPTY_COLLECTION_TEXT = "No entries yet. Add your first book, anime, or manga!"
NO_MATCHES_TEXT = "No entries match your current filters."

STAT_TILES = (
    ("total", "Total", "#60a5fa"),
    ("completed", "Completed", "#16a34a"),
    ("in_progress", "In Progress", "#ca8a04"),
    ("tbr", "TBR", "#2563eb"),
)


class CollectionScreen(QWidget):
    """Main screen listing the entries of the current view.

    Signals:
        add_requested: Emitted when the header or empty-state add button is clicked.
        edit_requested: Emitted with an entry id when a card's edit is clicked.
        delete_requested: Emitted with an entry id after the user confirms deletion.
    """

    add_requested = Signal()
    edit_requested = Signal(str)
    delete_requested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cards: List[EntryCard] = []
        self.stat_labels: Dict[str, QLabel] = {}
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(20, 20, 20, 20)

        header_layout = QHBoxLayout()
        title_label = QLabel("My TBR List")
        title_label.setStyleSheet("""
            QLabel {
                color: #fff;
                font-size: 24px;
                font-weight: bold;
            }
        """)
        header_layout.addWidget(title_label)
        header_layout.addStretch()

        self.add_button = QPushButton("Add Entry")
        self.add_button.clicked.connect(self.add_requested.emit)
        header_layout.addWidget(self.add_button)
        main_layout.addLayout(header_layout)

        subtitle = QLabel("Track your books, anime, and manga to read or watch")
        subtitle.setStyleSheet("QLabel { color: #888; padding-bottom: 10px; }")
        main_layout.addWidget(subtitle)

        stats_layout = QGridLayout()
        for column, (key, caption, color) in enumerate(STAT_TILES):
            value_label = QLabel("0")
            value_label.setAlignment(Qt.AlignCenter)
            value_label.setStyleSheet(
                f"QLabel {{ color: {color}; font-size: 22px; font-weight: bold; }}"
            )
            caption_label = QLabel(caption)
            caption_label.setAlignment(Qt.AlignCenter)
            caption_label.setStyleSheet("QLabel { color: #888; font-size: 12px; }")
            stats_layout.addWidget(value_label, 0, column)
            stats_layout.addWidget(caption_label, 1, column)
            self.stat_labels[key] = value_label
        main_layout.addLayout(stats_layout)

        self.filter_bar = SearchFilterBar()
        main_layout.addWidget(self.filter_bar)

        self.results_label = QLabel()
        self.results_label.setStyleSheet("QLabel { color: #888; font-size: 12px; }")
        main_layout.addWidget(self.results_label)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setStyleSheet("""
            QScrollArea {
                border: none;
                background-color: #1a1a1a;
            }
        """)

        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setSpacing(12)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.addStretch()
        scroll_area.setWidget(self.list_container)
        main_layout.addWidget(scroll_area, 1)

        # Empty state (hidden while entries are shown)
        self.empty_label = QLabel(EMPTY_COLLECTION_TEXT)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("""
            QLabel {
                color: #888;
                font-size: 18px;
                padding: 60px;
            }
        """)
        self.empty_label.hide()
        main_layout.addWidget(self.empty_label)

        self.add_first_button = QPushButton("Add Your First Entry")
        self.add_first_button.clicked.connect(self.add_requested.emit)
        self.add_first_button.hide()
        main_layout.addWidget(self.add_first_button, 0, Qt.AlignCenter)

    def display_view(self, view: CollectionView):
        """Render statistics, result count and one card per visible entry."""
        self._clear_cards()

        stats = view.stats
        self.stat_labels["total"].setText(str(stats.total))
        self.stat_labels["completed"].setText(str(stats.completed))
        self.stat_labels["in_progress"].setText(str(stats.in_progress))
        self.stat_labels["tbr"].setText(str(stats.tbr))

        self.results_label.setText(
            f"Showing {view.shown_count} of {view.total_count} entries"
        )
        self.filter_bar.update_active_filters(view.criteria)

        if not view.items:
            self.empty_label.setText(
                EMPTY_COLLECTION_TEXT if view.is_collection_empty else NO_MATCHES_TEXT
            )
            self.empty_label.show()
            self.add_first_button.setVisible(view.is_collection_empty)
            return

        self.empty_label.hide()
        self.add_first_button.hide()

        for item in view.items:
            card = EntryCard(item)
            card.edit_requested.connect(self.edit_requested.emit)
            card.delete_requested.connect(self._on_delete_requested)
            # Keep the trailing stretch last
            self.list_layout.insertWidget(self.list_layout.count() - 1, card)
            self.cards.append(card)

    def _clear_cards(self):
        for card in self.cards:
            self.list_layout.removeWidget(card)
            card.deleteLater()
        self.cards = []

    def _on_delete_requested(self, item_id: str):
        """Show confirmation dialog before emitting delete signal."""
        entry_title = "this entry"
        for card in self.cards:
            if card.item.id == item_id:
                entry_title = f"'{card.item.title}'"
                break

        reply = QMessageBox.question(
            self,
            "Delete Entry",
            f"Remove {entry_title} from your list?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )

        if reply == QMessageBox.Yes:
            self.delete_requested.emit(item_id)
