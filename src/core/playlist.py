# core/playlist.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from core.models import Song, SortKey

logger = logging.getLogger(__name__)


class PlaylistKind(Enum):
    GENERAL = "general"
    FAVORITES = "favorites"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Playlist:
    """
    Ordered collection of songs. Insertion order is kept until the
    playlist is explicitly sorted; duplicate titles are allowed.
    """

    def __init__(self, kind: PlaylistKind):
        self.kind = kind
        self._songs: list[Song] = []

    @property
    def name(self) -> str:
        return self.kind.display_name

    def add_song(self, song: Song) -> None:
        self._songs.append(song)

    def remove_song(self, title: str) -> int:
        before = len(self._songs)
        self._songs = [s for s in self._songs if not s.matches_title(title)]
        return before - len(self._songs)

    def get_songs(self) -> list[Song]:
        # copy: callers mutate only through the playlist
        return list(self._songs)

    def sort(self, key: SortKey) -> None:
        self._songs.sort(key=key.key_func())

    def is_empty(self) -> bool:
        return not self._songs

    def details(self) -> str:
        lines = [f"{self.name} Playlist:"]
        lines.extend(str(s) for s in self._songs)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))

    def __repr__(self) -> str:
        return f"Playlist(kind={self.kind.value!r}, songs={len(self._songs)})"


class PlaylistManager:
    def __init__(self, dump_on_change: bool = False):
        self._general = Playlist(PlaylistKind.GENERAL)
        self._favorites = Playlist(PlaylistKind.FAVORITES)
        self.dump_on_change = dump_on_change

    # ------------------ add ------------------
    def add_song_to_general(self, song: Song) -> None:
        self._add(self._general, song)

    def add_song_to_favorites(self, song: Song) -> None:
        self._add(self._favorites, song)

    # ------------------ remove ------------------
    def remove_song_from_general(self, title: str) -> int:
        return self._remove(self._general, title)

    def remove_song_from_favorites(self, title: str) -> int:
        return self._remove(self._favorites, title)

    def remove_song_everywhere(self, title: str) -> int:
        return self.remove_song_from_general(title) + self.remove_song_from_favorites(title)

    # ------------------ sort ------------------
    def sort_songs_by(self, key: SortKey | str) -> None:
        sort_key = SortKey.parse(key)
        self._general.sort(sort_key)
        self._favorites.sort(sort_key)
        logger.debug("Sorted playlists by %s", sort_key.value)
        self._dump()

    # ------------------ read ------------------
    def get_general_playlist(self) -> Playlist:
        return self._general

    def get_favorites_playlist(self) -> Playlist:
        return self._favorites

    def get_playlist(self, kind: PlaylistKind) -> Playlist:
        if kind is PlaylistKind.FAVORITES:
            return self._favorites
        return self._general

    # ------------------ helpers ------------------
    def _add(self, playlist: Playlist, song: Song) -> None:
        playlist.add_song(song)
        logger.info("Added %s to %s playlist", song, playlist.kind.value)
        self._dump()

    def _remove(self, playlist: Playlist, title: str) -> int:
        removed = playlist.remove_song(title)
        if removed:
            logger.info("Removed %d song(s) titled %r from %s playlist", removed, title, playlist.kind.value)
            self._dump()
        else:
            logger.debug("No song titled %r in %s playlist", title, playlist.kind.value)
        return removed

    def _dump(self) -> None:
        if not self.dump_on_change:
            return
        logger.debug("%s", self._general.details())
        logger.debug("%s", self._favorites.details())
