from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QCheckBox,
    QPushButton, QHBoxLayout, QFileDialog, QMessageBox
)
from PySide6.QtGui import QIntValidator

from core.models import Song
from core.utils import InvalidDurationError, song_from_input
from library.audio_tags import AUDIO_FILE_FILTER, TagReadError, read_song_tags

INVALID_DURATION_MESSAGE = "Please enter a valid non-negative number for duration."

class AddSongDialog(QDialog):
    def __init__(self, app_state, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Add Song")
        self.resize(380, 220)
        self.app_state = app_state
        self._song: Song | None = None

        layout = QVBoxLayout(self)

        form = QFormLayout()
        self.title_edit = QLineEdit()
        self.artist_edit = QLineEdit()
        self.genre_edit = QLineEdit()
        self.duration_edit = QLineEdit()
        self.duration_edit.setPlaceholderText("seconds")
        # hint only; parse_duration is the real check
        self.duration_edit.setValidator(QIntValidator(0, 2**31 - 1, self))
        form.addRow("Title:", self.title_edit)
        form.addRow("Artist:", self.artist_edit)
        form.addRow("Genre:", self.genre_edit)
        form.addRow("Duration:", self.duration_edit)
        layout.addLayout(form)

        self.favorite_chk = QCheckBox("Add to favorites")
        layout.addWidget(self.favorite_chk)

        btn_layout = QHBoxLayout()
        self.from_file_btn = QPushButton("From file...")
        self.cancel_btn = QPushButton("Cancel")
        self.add_btn = QPushButton("Add")
        self.add_btn.setDefault(True)
        btn_layout.addWidget(self.from_file_btn)
        btn_layout.addStretch(1)
        btn_layout.addWidget(self.cancel_btn)
        btn_layout.addWidget(self.add_btn)
        layout.addLayout(btn_layout)

        # connect
        self.from_file_btn.clicked.connect(self.choose_file)
        self.cancel_btn.clicked.connect(self.reject)
        self.add_btn.clicked.connect(self.try_accept)
        for edit in (self.title_edit, self.artist_edit, self.genre_edit):
            edit.textChanged.connect(self._update_add_enabled)

        self._update_add_enabled()

    # ------------------ result ------------------
    def song(self) -> Song | None:
        return self._song

    def add_to_favorites(self) -> bool:
        return self.favorite_chk.isChecked()

    # ------------------ actions ------------------
    def _update_add_enabled(self):
        filled = all(
            e.text().strip() for e in (self.title_edit, self.artist_edit, self.genre_edit)
        )
        self.add_btn.setEnabled(filled)

    def try_accept(self) -> bool:
        try:
            song = song_from_input(
                self.title_edit.text(),
                self.artist_edit.text(),
                self.genre_edit.text(),
                self.duration_edit.text(),
            )
        except InvalidDurationError:
            QMessageBox.warning(self, "Invalid duration", INVALID_DURATION_MESSAGE)
            self.duration_edit.setFocus()
            return False

        if song is None:
            return False

        self._song = song
        self.accept()
        return True

    def choose_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Select Audio File", "", AUDIO_FILE_FILTER)
        if not path:
            return
        self.load_from_file(path)

    def load_from_file(self, path: str) -> bool:
        try:
            tags = read_song_tags(path)
        except TagReadError as e:
            self.app_state.notify(str(e), "warning")
            return False

        self.title_edit.setText(tags.title)
        if tags.artist:
            self.artist_edit.setText(tags.artist)
        if tags.genre:
            self.genre_edit.setText(tags.genre)
        if tags.duration is not None:
            self.duration_edit.setText(str(tags.duration))
        return True
