"""UI layer - PySide6 presentation components."""

from .collection_screen import CollectionScreen
from .entry_card import EntryCard
from .entry_form_dialog import EntryFormDialog
from .main_window import MainWindow
from .search_filter_bar import SearchFilterBar

__all__ = [
    "MainWindow",
    "CollectionScreen",
    "EntryCard",
    "EntryFormDialog",
    "SearchFilterBar",
]
