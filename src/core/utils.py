import re

from core.models import Song

_DURATION_RE = re.compile(r"^[+-]?\d+$")


class InvalidDurationError(ValueError):
    """Duration input that is not a non-negative whole number of seconds."""


def parse_duration(text: str | None) -> int:
    """
    Parse a duration typed by the user, in seconds.
    Only plain base-10 integers >= 0 are accepted.
    """
    raw = (text or "").strip()
    if not _DURATION_RE.match(raw):
        raise InvalidDurationError(f"Invalid duration: {text!r}")
    value = int(raw)
    if value < 0:
        raise InvalidDurationError(f"Negative duration: {text!r}")
    return value


def song_from_input(title: str | None, artist: str | None, genre: str | None, duration_text: str | None) -> Song | None:
    """
    Build a Song from dialog fields.
    Returns None when a text field is blank (the add is aborted),
    raises InvalidDurationError for a bad duration.
    """
    title = (title or "").strip()
    artist = (artist or "").strip()
    genre = (genre or "").strip()
    if not title or not artist or not genre:
        return None

    return Song(title=title, artist=artist, genre=genre, duration=parse_duration(duration_text))


def fmt_duration(seconds: int | None) -> str:
    if seconds is None:
        return ""
    m = seconds // 60
    s = seconds % 60
    return f"{m}:{s:02d}"
