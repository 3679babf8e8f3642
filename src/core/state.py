from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from core.config import AppConfig
from core.models import Song, SortKey
from core.playlist import PlaylistManager

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warning/error

class AppState(QObject):
    notification = Signal(object)   # emits Notify
    playlists_changed = Signal()

    def __init__(self, config: AppConfig | None = None):
        super().__init__()
        self.config = config or AppConfig()
        self.manager = PlaylistManager(dump_on_change=self.config.dump_on_change)
        # shown by the main window once it exists
        self.queued_notifications: list[Notify] = [
            Notify(message=w, notify_type="warning") for w in self.config.warnings
        ]

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    # UI-facing mutations; each one tells open views to refresh
    def add_song(self, song: Song, favorite: bool = False) -> None:
        self.manager.add_song_to_general(song)
        if favorite:
            self.manager.add_song_to_favorites(song)
        self.playlists_changed.emit()

    def remove_song(self, title: str) -> int:
        removed = self.manager.remove_song_everywhere(title)
        if removed:
            self.playlists_changed.emit()
        return removed

    def sort_songs(self, key: SortKey | str) -> None:
        self.manager.sort_songs_by(key)
        self.playlists_changed.emit()
