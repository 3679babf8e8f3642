# core/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Any


@dataclass(frozen=True)
class Song:
    title: str
    artist: str
    genre: str
    duration: int  # seconds, validated at the input boundary

    def matches_title(self, title: str) -> bool:
        return self.title.lower() == (title or "").lower()

    def __str__(self) -> str:
        return f"{self.title} by {self.artist} ({self.genre}, {self.duration} seconds)"


class SortKey(Enum):
    TITLE = "title"
    ARTIST = "artist"
    GENRE = "genre"
    DURATION = "duration"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def key_func(self) -> Callable[[Song], Any]:
        if self is SortKey.DURATION:
            return lambda song: song.duration
        field = self.value
        return lambda song: getattr(song, field).lower()

    @classmethod
    def parse(cls, value: "SortKey | str") -> "SortKey":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for key in cls:
            if key.value == text:
                return key
        raise ValueError(f"Unknown sort key: {value!r}")
