"""Entry form dialog - add or edit a tracked entry."""

from PySide6.QtCore import QLocale, Signal
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tbr_tracker.core import CATEGORIES, MAX_RATING, MIN_RATING, STATUSES
from tbr_tracker.services import EntryForm


class EntryFormDialog(QDialog):
    """Modal form collecting the fields of one entry.

    The dialog only gathers input; validation happens in the EntryEditor.
    It stays open after submit_requested until close_dialog() is called.

    Signals:
        submit_requested: Emitted with the current EntryForm when submit is clicked.
        cancelled: Emitted when Cancel is clicked.
        dismissed: Emitted when the dialog is closed any other way (Escape, close button).
    """

    submit_requested = Signal(object)
    cancelled = Signal()
    dismissed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(500)
        self._genres = []
        self._setup_ui()
        self.load_form(EntryForm(), editing=False)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        form_layout = QFormLayout()

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Enter title...")
        form_layout.addRow("Title *", self.title_edit)

        self.category_combo = QComboBox()
        self.category_combo.addItems(list(CATEGORIES))
        self.category_combo.setPlaceholderText("Select category")
        form_layout.addRow("Category *", self.category_combo)

        self.status_combo = QComboBox()
        self.status_combo.addItems(list(STATUSES))
        self.status_combo.setPlaceholderText("Select status")
        form_layout.addRow("Status *", self.status_combo)

        self.image_edit = QLineEdit()
        self.image_edit.setPlaceholderText("https://example.com/image.jpg")
        form_layout.addRow("Image URL (optional)", self.image_edit)

        self.rating_edit = QLineEdit()
        self.rating_edit.setPlaceholderText("0.0 - 5.0")
        validator = QDoubleValidator(MIN_RATING, MAX_RATING, 1, self.rating_edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        validator.setLocale(QLocale.c())
        self.rating_edit.setValidator(validator)
        form_layout.addRow("Rating (optional)", self.rating_edit)

        genre_row = QHBoxLayout()
        self.new_genre_edit = QLineEdit()
        self.new_genre_edit.setPlaceholderText("Add genre...")
        self.new_genre_edit.returnPressed.connect(self.add_genre)
        self.add_genre_button = QPushButton("Add")
        self.add_genre_button.setAutoDefault(False)
        self.add_genre_button.clicked.connect(self.add_genre)
        genre_row.addWidget(self.new_genre_edit)
        genre_row.addWidget(self.add_genre_button)
        form_layout.addRow("Genres", genre_row)

        self.genre_container = QWidget()
        self.genre_layout = QHBoxLayout(self.genre_container)
        self.genre_layout.setContentsMargins(0, 0, 0, 0)
        form_layout.addRow("", self.genre_container)

        self.notes_edit = QPlainTextEdit()
        self.notes_edit.setPlaceholderText("Add your thoughts, progress, or any notes...")
        self.notes_edit.setFixedHeight(80)
        form_layout.addRow("Notes (optional)", self.notes_edit)

        layout.addLayout(form_layout)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setAutoDefault(False)
        self.cancel_button.clicked.connect(self._on_cancel_clicked)
        self.submit_button = QPushButton()
        self.submit_button.setAutoDefault(False)
        self.submit_button.clicked.connect(self._on_submit_clicked)
        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.submit_button)
        layout.addLayout(buttons)

    def load_form(self, form: EntryForm, editing: bool):
        """Fill every widget from form and set add/edit wording."""
        self.setWindowTitle("Edit Entry" if editing else "Add New Entry")
        self.submit_button.setText("Update Entry" if editing else "Add Entry")

        self.title_edit.setText(form.title)
        self.category_combo.setCurrentIndex(self.category_combo.findText(form.category))
        self.status_combo.setCurrentIndex(self.status_combo.findText(form.status))
        self.image_edit.setText(form.image)
        self.rating_edit.setText(form.rating)
        self.notes_edit.setPlainText(form.notes)
        self.new_genre_edit.setText(form.new_genre)
        self._genres = list(form.genres)
        self._render_genres()

    def read_form(self) -> EntryForm:
        return EntryForm(
            title=self.title_edit.text(),
            category=self.category_combo.currentText(),
            status=self.status_combo.currentText(),
            image=self.image_edit.text(),
            notes=self.notes_edit.toPlainText(),
            rating=self.rating_edit.text(),
            genres=list(self._genres),
            new_genre=self.new_genre_edit.text(),
        )

    def present(self, form: EntryForm, editing: bool):
        """Load form and show the dialog without blocking."""
        self.load_form(form, editing)
        self.open()

    def close_dialog(self):
        """Close after an accepted submission without emitting dismissed."""
        self.accept()

    def add_genre(self):
        form = self.read_form()
        if form.add_genre():
            self._genres = form.genres
            self.new_genre_edit.clear()
            self._render_genres()

    def remove_genre(self, genre: str):
        form = self.read_form()
        if form.remove_genre(genre):
            self._genres = form.genres
            self._render_genres()

    @property
    def genres(self):
        return list(self._genres)

    def reject(self):
        """Escape or window close counts as an outside dismiss."""
        super().reject()
        self.dismissed.emit()

    def _render_genres(self):
        while self.genre_layout.count():
            widget = self.genre_layout.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()

        for genre in self._genres:
            chip = QPushButton(f"{genre}  ✕")
            chip.setAutoDefault(False)
            chip.setFlat(True)
            chip.clicked.connect(lambda _checked=False, g=genre: self.remove_genre(g))
            self.genre_layout.addWidget(chip)

    def _on_cancel_clicked(self):
        # Bypass reject() so a cancel is not reported as a dismiss
        QDialog.reject(self)
        self.cancelled.emit()

    def _on_submit_clicked(self):
        self.submit_requested.emit(self.read_form())
