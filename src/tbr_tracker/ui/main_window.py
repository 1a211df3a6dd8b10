"""Main Window - Application shell with menus."""

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget


class MainWindow(QMainWindow):
    """Provides the application shell and the File menu."""

    # Signal emitted when the user asks to add a new entry
    add_entry_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("My TBR List")
        self.setGeometry(100, 100, 1000, 800)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        add_action = QAction("&Add Entry...", self)
        add_action.setShortcut("Ctrl+N")
        add_action.triggered.connect(self.add_entry_requested.emit)
        file_menu.addAction(add_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_screen(self, screen: QWidget):
        """Set the collection screen widget in the main layout."""
        self.main_layout.addWidget(screen)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)
