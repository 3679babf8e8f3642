# src/library/audio_tags.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from mutagen import File as MutagenFile
from mutagen._util import MutagenError

logger = logging.getLogger(__name__)

AUDIO_EXTS = {".mp3", ".m4a", ".flac", ".ogg", ".opus", ".wav"}

# filter string for QFileDialog
AUDIO_FILE_FILTER = "Audio files (" + " ".join(f"*{e}" for e in sorted(AUDIO_EXTS)) + ")"


class TagReadError(Exception):
    pass


@dataclass(frozen=True)
class SongTags:
    title: str
    artist: str
    genre: str
    duration: int | None


def _first(easy, key: str) -> str:
    v = easy.get(key) if easy is not None else None
    if not v:
        return ""
    if isinstance(v, list):
        return str(v[0]).strip() if v else ""
    return str(v).strip()


def is_audio_path(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in AUDIO_EXTS


def read_song_tags(path: str) -> SongTags:
    """
    Read title / artist / genre and length from an audio file.
    Missing tags come back as empty strings; the title falls back to the file name.
    """
    if not is_audio_path(path):
        raise TagReadError(f"Unsupported file type: {os.path.basename(path)}")

    try:
        audio = MutagenFile(path, easy=True)
    except (MutagenError, OSError) as e:
        logger.exception("Failed to read tags from %s", path)
        raise TagReadError(f"Cannot read {os.path.basename(path)}: {e}") from e

    if audio is None:
        raise TagReadError(f"Cannot parse file: {os.path.basename(path)}")

    title = _first(audio, "title") or os.path.splitext(os.path.basename(path))[0]

    duration = None
    info = getattr(audio, "info", None)
    length = getattr(info, "length", None)
    if length is not None:
        duration = max(0, int(round(float(length))))

    tags = SongTags(
        title=title,
        artist=_first(audio, "artist"),
        genre=_first(audio, "genre"),
        duration=duration,
    )
    logger.debug("Read tags from %s: %s", path, tags)
    return tags
