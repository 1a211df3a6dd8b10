"""Entry card - one tracked entry in the collection list."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tbr_tracker.core import TBRItem

STATUS_COLORS = {
    "TBR": ("#1e3a8a", "#93c5fd"),
    "Reading": ("#713f12", "#fde047"),
    "Watching": ("#713f12", "#fde047"),
    "Completed": ("#14532d", "#86efac"),
}
CATEGORY_COLORS = {
    "Book": ("#581c87", "#d8b4fe"),
    "Anime": ("#831843", "#f9a8d4"),
    "Manga": ("#7c2d12", "#fdba74"),
}
FALLBACK_COLORS = ("#1f2937", "#d1d5db")
MAX_VISIBLE_GENRES = 3


def badge_style(background: str, foreground: str) -> str:
    return f"""
        QLabel {{
            background-color: {background};
            color: {foreground};
            border-radius: 8px;
            padding: 2px 8px;
            font-size: 12px;
        }}
    """


def visible_genres(genres: List[str], limit: int = MAX_VISIBLE_GENRES) -> List[str]:
    """First `limit` genres, followed by a "+N" marker for the rest."""
    shown = list(genres[:limit])
    if len(genres) > limit:
        shown.append(f"+{len(genres) - limit}")
    return shown


class EntryCard(QWidget):
    """Card showing title, badges, rating, genres and notes of one entry.

    Signals:
        edit_requested: Emitted with the entry id when edit is clicked.
        delete_requested: Emitted with the entry id when delete is clicked.
    """

    edit_requested = Signal(str)
    delete_requested = Signal(str)

    def __init__(self, item: TBRItem, parent=None):
        super().__init__(parent)
        self.item = item
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(15)

        # Image loading is out of scope; show the initial as a cover stand-in
        self.cover_label = QLabel(self.item.title[:1].upper())
        self.cover_label.setAlignment(Qt.AlignCenter)
        self.cover_label.setFixedSize(80, 112)
        self.cover_label.setToolTip(self.item.image)
        self.cover_label.setStyleSheet("""
            QLabel {
                border: 2px solid #444;
                background-color: #222;
                color: #666;
                font-size: 28px;
            }
        """)
        layout.addWidget(self.cover_label)

        details = QVBoxLayout()
        details.setSpacing(6)

        header = QHBoxLayout()
        self.title_label = QLabel(self.item.title)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("QLabel { color: #ddd; font-size: 16px; font-weight: bold; }")
        header.addWidget(self.title_label, 1)

        self.edit_button = QPushButton("Edit")
        self.edit_button.setFixedWidth(60)
        self.edit_button.clicked.connect(lambda: self.edit_requested.emit(self.item.id))
        header.addWidget(self.edit_button)

        self.delete_button = QPushButton("🗑")
        self.delete_button.setFixedWidth(40)
        self.delete_button.clicked.connect(lambda: self.delete_requested.emit(self.item.id))
        header.addWidget(self.delete_button)
        details.addLayout(header)

        badges = QHBoxLayout()
        self.status_badge = QLabel(self.item.status)
        self.status_badge.setStyleSheet(
            badge_style(*STATUS_COLORS.get(self.item.status, FALLBACK_COLORS))
        )
        self.category_badge = QLabel(self.item.category)
        self.category_badge.setStyleSheet(
            badge_style(*CATEGORY_COLORS.get(self.item.category, FALLBACK_COLORS))
        )
        badges.addWidget(self.status_badge)
        badges.addWidget(self.category_badge)
        badges.addStretch()
        details.addLayout(badges)

        # A rating of 0 reads as "unrated" on the card
        self.rating_label = QLabel(f"★ {self.item.rating:g}" if self.item.rating else "")
        self.rating_label.setStyleSheet("QLabel { color: #facc15; font-size: 13px; }")
        self.rating_label.setVisible(bool(self.item.rating))
        details.addWidget(self.rating_label)

        genres = QHBoxLayout()
        self.genre_labels = []
        for genre in visible_genres(list(self.item.genre)):
            label = QLabel(genre)
            label.setStyleSheet(badge_style("transparent", "#aaa"))
            genres.addWidget(label)
            self.genre_labels.append(label)
        genres.addStretch()
        details.addLayout(genres)

        self.notes_label = QLabel(self.item.notes or "")
        self.notes_label.setWordWrap(True)
        self.notes_label.setStyleSheet("QLabel { color: #888; font-size: 13px; }")
        self.notes_label.setVisible(bool(self.item.notes))
        details.addWidget(self.notes_label)

        layout.addLayout(details, 1)
