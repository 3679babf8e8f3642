import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QInputDialog
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QShortcut, QKeySequence

from core.models import SortKey
from core.playlist import PlaylistKind
from ui.dialogs.add_song_dialog import AddSongDialog
from ui.dialogs.playlist_dialog import PlaylistDialog
from ui.widgets.toast import ToastManager

logger = logging.getLogger(__name__)

EMPTY_PLAYLIST_MESSAGE = "No songs in this playlist yet."


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Music Playlist Manager")
        self.resize(600, 400)
        self.app_state = app_state

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)
        self.layout.setSpacing(10)

        self.toasts = ToastManager(self)
        self.app_state.notification.connect(self._on_notify)

        # --- Header ---
        self.title_label = QLabel("Music Playlist Manager")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setFont(QFont("Serif", 24, QFont.Weight.Bold))
        self.layout.addWidget(self.title_label)

        # --- Actions ---
        self.btn_add = QPushButton("Add Song")
        self.btn_remove = QPushButton("Remove Song")
        self.btn_view_general = QPushButton("View General Playlist")
        self.btn_view_favorites = QPushButton("View Favorites Playlist")
        self.btn_sort = QPushButton("Sort Songs")

        for btn in (
            self.btn_add,
            self.btn_remove,
            self.btn_view_general,
            self.btn_view_favorites,
            self.btn_sort,
        ):
            btn.setMinimumHeight(36)
            self.layout.addWidget(btn)

        self.btn_add.clicked.connect(self.add_song)
        self.btn_remove.clicked.connect(self.remove_song)
        self.btn_view_general.clicked.connect(lambda: self.view_playlist(PlaylistKind.GENERAL))
        self.btn_view_favorites.clicked.connect(lambda: self.view_playlist(PlaylistKind.FAVORITES))
        self.btn_sort.clicked.connect(self.sort_songs)

        # --- Shortcuts ---
        QShortcut(QKeySequence("Ctrl+N"), self, activated=self.add_song)
        QShortcut(QKeySequence("Delete"), self, activated=self.remove_song)

        self.show_queued_notifications()

    # ------------------ add ------------------
    def add_song(self):
        dlg = AddSongDialog(self.app_state, self)
        if not dlg.exec():
            return
        song = dlg.song()
        if song is None:
            return

        favorite = dlg.add_to_favorites()
        self.app_state.add_song(song, favorite=favorite)
        where = "general and favorites playlists" if favorite else "general playlist"
        self.app_state.notify(f"Added \"{song.title}\" to {where}.", "success")

    # ------------------ remove ------------------
    def remove_song(self):
        title, ok = QInputDialog.getText(self, "Remove Song", "Enter the title of the song to remove:")
        if not ok or not title.strip():
            return
        self.remove_title(title.strip())

    def remove_title(self, title: str) -> int:
        removed = self.app_state.remove_song(title)
        if removed:
            self.app_state.notify(f"Removed {removed} entr{'y' if removed == 1 else 'ies'} titled \"{title}\".", "success")
        else:
            self.app_state.notify(f"No song titled \"{title}\" found.", "info")
        return removed

    # ------------------ view ------------------
    def view_playlist(self, kind: PlaylistKind):
        playlist = self.app_state.manager.get_playlist(kind)
        if playlist.is_empty():
            self.app_state.notify(EMPTY_PLAYLIST_MESSAGE, "info")
            return
        dlg = PlaylistDialog(self.app_state, kind, self)
        dlg.exec()

    # ------------------ sort ------------------
    def sort_songs(self):
        labels = [k.label for k in SortKey]
        choice, ok = QInputDialog.getItem(self, "Sort Songs", "Sort by:", labels, 0, False)
        if not ok or not choice:
            return
        self.app_state.sort_songs(choice)
        self.app_state.notify(f"Songs sorted by {choice.lower()}.", "info")

    # ------------------ notifications ------------------
    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = getattr(n, "notify_type", "info") or "info"
        logger.debug("Toast [%s]: %s", kind, msg)
        self.toasts.show_toast(msg, notify_type=kind, timeout_ms=self.app_state.config.toast_ms)

    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()
