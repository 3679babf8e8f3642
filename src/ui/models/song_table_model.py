# ui/song_table_model.py
from __future__ import annotations
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from core.models import Song
from core.utils import fmt_duration

COLUMNS = ["Title", "Artist", "Genre", "Duration"]

class SongTableModel(QAbstractTableModel):
    def __init__(self, songs=()):
        super().__init__()
        self._rows: list[Song] = list(songs)

    def set_songs(self, songs):
        self.beginResetModel()
        self._rows = list(songs)
        self.endResetModel()

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()) -> int:
        return len(COLUMNS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole or orientation != Qt.Horizontal:
            return None
        return COLUMNS[section]

    def data(self, index: QModelIndex, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        song = self._rows[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == 0:
                return song.title
            if col == 1:
                return song.artist
            if col == 2:
                return song.genre
            if col == 3:
                return fmt_duration(song.duration)
        if role == Qt.ToolTipRole:
            return str(song)
        if role == Qt.TextAlignmentRole and col == 3:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None
