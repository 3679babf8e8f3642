from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QTableView, QLabel, QPushButton, QHBoxLayout, QHeaderView
)

from core.playlist import PlaylistKind
from core.utils import fmt_duration
from ui.models.song_table_model import SongTableModel

class PlaylistDialog(QDialog):
    def __init__(self, app_state, kind: PlaylistKind, parent=None):
        super().__init__(parent)
        self.app_state = app_state
        self.kind = kind
        self.setWindowTitle(f"{kind.display_name} Playlist")
        self.resize(560, 360)

        layout = QVBoxLayout(self)

        self.summary = QLabel()
        self.summary.setObjectName("PlaylistSummary")
        layout.addWidget(self.summary)

        self.model = SongTableModel()
        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QTableView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableView.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.setAlternatingRowColors(True)
        self.table.setShowGrid(False)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self.table)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch(1)
        self.close_btn = QPushButton("Close")
        btn_layout.addWidget(self.close_btn)
        layout.addLayout(btn_layout)

        self.close_btn.clicked.connect(self.accept)
        self.app_state.playlists_changed.connect(self.refresh)
        self._connected = True

        self.refresh()

    def refresh(self):
        playlist = self.app_state.manager.get_playlist(self.kind)
        songs = playlist.get_songs()
        self.model.set_songs(songs)

        total = sum(s.duration for s in songs)
        self.summary.setText(f"{len(songs)} song(s), {fmt_duration(total)} total")

    def done(self, result):
        if self._connected:
            self._connected = False
            self.app_state.playlists_changed.disconnect(self.refresh)
        super().done(result)
