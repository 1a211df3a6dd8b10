"""Collection Coordinator - Orchestrates editing, filtering and display of entries."""

from dataclasses import replace

from PySide6.QtCore import QObject, Signal, Slot

from tbr_tracker.core import CollectionView, ViewCriteria
from tbr_tracker.io import CollectionStore
from tbr_tracker.services import EntryEditor, EntryForm, derive_view
from tbr_tracker.ui import CollectionScreen, EntryFormDialog, MainWindow
from tbr_tracker.utils import get_logger

logger = get_logger(__name__)


class CollectionCoordinator(QObject):
    """Connects the collection screen and entry dialog to the store.

    Responsibilities:
    - Open the entry dialog blank (add) or prefilled (edit)
    - Apply accepted submissions to the store
    - Delete entries
    - Track the search query and filters
    - Re-derive and display the view after every change
    """

    # Emitted with the freshly derived CollectionView
    view_changed = Signal(object)

    def __init__(
        self,
        collection_screen: CollectionScreen,
        entry_dialog: EntryFormDialog,
        store: CollectionStore,
        editor: EntryEditor,
        main_window: MainWindow,
    ):
        super().__init__()

        if collection_screen is None:
            raise ValueError("CollectionScreen must not be None")
        if entry_dialog is None:
            raise ValueError("EntryFormDialog must not be None")
        if store is None:
            raise ValueError("CollectionStore must not be None")
        if editor is None:
            raise ValueError("EntryEditor must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.collection_screen = collection_screen
        self.entry_dialog = entry_dialog
        self.store = store
        self.editor = editor
        self.main_window = main_window
        self.criteria = ViewCriteria()

        # Wire UI signals
        self.main_window.add_entry_requested.connect(self.handle_add_requested)
        self.collection_screen.add_requested.connect(self.handle_add_requested)
        self.collection_screen.edit_requested.connect(self.handle_edit_requested)
        self.collection_screen.delete_requested.connect(self.handle_delete_requested)

        filter_bar = self.collection_screen.filter_bar
        filter_bar.query_changed.connect(self.handle_query_changed)
        filter_bar.status_filter_changed.connect(self.handle_status_filter_changed)
        filter_bar.category_filter_changed.connect(self.handle_category_filter_changed)
        filter_bar.clear_requested.connect(self.handle_clear_filters)

        self.entry_dialog.submit_requested.connect(self.handle_submit_requested)
        self.entry_dialog.cancelled.connect(self.handle_dialog_cancelled)
        self.entry_dialog.dismissed.connect(self.handle_dialog_dismissed)

    def show_collection(self):
        """Display the collection screen with the current view."""
        self.refresh()

    def current_view(self) -> CollectionView:
        return derive_view(self.store.items, self.criteria)

    def refresh(self) -> CollectionView:
        """Re-derive the view from the store and push it to the screen."""
        view = self.current_view()
        self.collection_screen.display_view(view)
        self.view_changed.emit(view)
        return view

    @Slot()
    def handle_add_requested(self):
        form = self.editor.open_blank()
        self.entry_dialog.present(form, editing=False)

    @Slot(str)
    def handle_edit_requested(self, item_id: str):
        item = self.store.get(item_id)
        if item is None:
            logger.debug("Edit ignored, entry %s no longer exists", item_id)
            return

        form = self.editor.open_for_edit(item)
        self.entry_dialog.present(form, editing=True)

    @Slot(object)
    def handle_submit_requested(self, form: EntryForm):
        """Apply a submitted form; an invalid form leaves the dialog open."""
        if not self.editor.is_open:
            return

        self.editor.form = form
        submission = self.editor.submit()
        if submission is None:
            return

        if submission.is_new:
            self.store.create(submission.draft)
        else:
            self.store.update(submission.item_id, submission.draft)

        self.entry_dialog.close_dialog()
        self.refresh()

    @Slot()
    def handle_dialog_cancelled(self):
        self.editor.cancel()

    @Slot()
    def handle_dialog_dismissed(self):
        self.editor.dismiss()

    @Slot(str)
    def handle_delete_requested(self, item_id: str):
        self.store.delete(item_id)
        self.refresh()

    @Slot(str)
    def handle_query_changed(self, query: str):
        self._set_criteria(replace(self.criteria, query=query))

    @Slot(str)
    def handle_status_filter_changed(self, status_filter: str):
        self._set_criteria(replace(self.criteria, status_filter=status_filter))

    @Slot(str)
    def handle_category_filter_changed(self, category_filter: str):
        self._set_criteria(replace(self.criteria, category_filter=category_filter))

    @Slot()
    def handle_clear_filters(self):
        self._set_criteria(ViewCriteria.cleared())
        self.collection_screen.filter_bar.set_criteria(self.criteria)

    def _set_criteria(self, criteria: ViewCriteria):
        self.criteria = criteria
        self.refresh()
