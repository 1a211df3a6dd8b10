"""Main entry point for the TBR tracker application."""

import sys

from PySide6.QtWidgets import QApplication

from tbr_tracker.coordinators import CollectionCoordinator
from tbr_tracker.io import CollectionStore, SeedLoader
from tbr_tracker.services import EntryEditor, PlaceholderImageService, SettingsManager
from tbr_tracker.ui import CollectionScreen, EntryFormDialog, MainWindow
from tbr_tracker.utils import get_logger, setup_logging

logger = get_logger(__name__)


def load_seed_items(settings: SettingsManager, main_window: MainWindow) -> list:
    """Load the configured seed file, reporting failures to the user."""
    seed_path = settings.get_seed_path()
    if seed_path is None:
        return []

    try:
        items = SeedLoader().load(seed_path)
    except (RuntimeError, ValueError) as e:
        logger.error("Could not load seed data from %s: %s", seed_path, e)
        main_window.show_error("Seed Data Error", f"Starting with an empty list.\n\n{e}")
        return []

    logger.info("Loaded %d seed entries from %s", len(items), seed_path)
    return items


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    setup_logging(settings.get_log_level(), force=True)

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("TBR Tracker")
    app.setOrganizationName("TBRTracker")

    # 3. Construct UI
    main_window = MainWindow()
    collection_screen = CollectionScreen()
    main_window.set_screen(collection_screen)
    entry_dialog = EntryFormDialog(main_window)

    # 4. Initialize state and services
    try:
        store = CollectionStore(seed_items=load_seed_items(settings, main_window))
    except ValueError as e:
        main_window.show_error("Seed Data Error", f"Starting with an empty list.\n\n{e}")
        store = CollectionStore()

    editor = EntryEditor(
        placeholders=PlaceholderImageService(settings.get_placeholder_base_url()),
        regenerate_gallery=settings.regenerate_gallery_on_edit(),
    )

    # 5. Instantiate Coordinator (Dependency Injection, wires signals)
    coordinator = CollectionCoordinator(
        collection_screen=collection_screen,
        entry_dialog=entry_dialog,
        store=store,
        editor=editor,
        main_window=main_window,
    )
    coordinator.show_collection()

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
