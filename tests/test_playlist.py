import logging

import pytest

from core.models import Song, SortKey
from core.playlist import Playlist, PlaylistKind, PlaylistManager


def titles(playlist):
    return [s.title for s in playlist.get_songs()]


def test_song_str_format(imagine):
    assert str(imagine) == "Imagine by John Lennon (Rock, 183 seconds)"


def test_song_is_immutable(imagine):
    with pytest.raises(AttributeError):
        imagine.title = "Other"


def test_add_keeps_insertion_order_and_duplicates(imagine, bold):
    p = Playlist(PlaylistKind.GENERAL)
    p.add_song(imagine)
    p.add_song(bold)
    p.add_song(imagine)
    assert titles(p) == ["Imagine", "Bold", "Imagine"]
    assert len(p) == 3


def test_remove_is_case_insensitive_and_removes_all_matches(imagine, bold):
    p = Playlist(PlaylistKind.GENERAL)
    for s in (imagine, bold, imagine):
        p.add_song(s)
    assert p.remove_song("imagine") == 2
    assert titles(p) == ["Bold"]


def test_remove_missing_title_is_noop(imagine):
    p = Playlist(PlaylistKind.FAVORITES)
    p.add_song(imagine)
    assert p.remove_song("Nope") == 0
    assert titles(p) == ["Imagine"]


def test_get_songs_returns_copy(imagine):
    p = Playlist(PlaylistKind.GENERAL)
    p.add_song(imagine)
    p.get_songs().clear()
    assert len(p) == 1


def test_details_lists_header_then_songs(imagine, bold):
    p = Playlist(PlaylistKind.FAVORITES)
    assert p.details() == "Favorites Playlist:"
    p.add_song(imagine)
    p.add_song(bold)
    assert p.details().splitlines() == [
        "Favorites Playlist:",
        "Imagine by John Lennon (Rock, 183 seconds)",
        "Bold by X (Pop, 200 seconds)",
    ]


def test_manager_add_general_does_not_touch_favorites(imagine, bold):
    m = PlaylistManager()
    m.add_song_to_general(imagine)
    m.add_song_to_favorites(bold)
    assert titles(m.get_general_playlist()) == ["Imagine"]
    assert titles(m.get_favorites_playlist()) == ["Bold"]


def test_manager_remove_is_independent_per_playlist(imagine):
    m = PlaylistManager()
    m.add_song_to_general(imagine)
    m.add_song_to_favorites(imagine)

    assert m.remove_song_from_general("IMAGINE") == 1
    assert titles(m.get_general_playlist()) == []
    assert titles(m.get_favorites_playlist()) == ["Imagine"]

    assert m.remove_song_from_favorites("imagine") == 1
    assert m.get_favorites_playlist().is_empty()


def test_manager_remove_everywhere(imagine, bold):
    m = PlaylistManager()
    m.add_song_to_general(imagine)
    m.add_song_to_general(bold)
    m.add_song_to_favorites(imagine)
    assert m.remove_song_everywhere("Imagine") == 2
    assert titles(m.get_general_playlist()) == ["Bold"]
    assert titles(m.get_favorites_playlist()) == []


def test_sort_by_title_example(imagine, bold):
    m = PlaylistManager()
    m.add_song_to_general(imagine)
    m.add_song_to_general(bold)
    m.sort_songs_by(SortKey.TITLE)
    assert titles(m.get_general_playlist()) == ["Bold", "Imagine"]


@pytest.mark.parametrize(
    "key, expected",
    [
        ("title", ["Anthem", "Bold", "imagine", "Zebra"]),
        ("artist", ["Zebra", "Anthem", "imagine", "Bold"]),
        ("genre", ["Anthem", "Zebra", "Bold", "imagine"]),
        ("duration", ["Anthem", "Zebra", "imagine", "Bold"]),
    ],
)
def test_sort_sorts_both_playlists(songs, key, expected):
    m = PlaylistManager()
    for s in songs:
        m.add_song_to_general(s)
        m.add_song_to_favorites(s)
    m.sort_songs_by(key)
    assert titles(m.get_general_playlist()) == expected
    assert titles(m.get_favorites_playlist()) == expected


def test_sort_is_stable_for_ties():
    m = PlaylistManager()
    first = Song("same", "B", "Pop", 10)
    second = Song("SAME", "A", "Pop", 10)
    third = Song("Same", "C", "Pop", 10)
    for s in (first, second, third):
        m.add_song_to_general(s)
    m.sort_songs_by(SortKey.TITLE)
    assert m.get_general_playlist().get_songs() == [first, second, third]
    m.sort_songs_by(SortKey.DURATION)
    assert m.get_general_playlist().get_songs() == [first, second, third]


def test_duration_sort_is_numeric():
    m = PlaylistManager()
    for d in (100, 9, 20):
        m.add_song_to_general(Song(f"t{d}", "a", "g", d))
    m.sort_songs_by(SortKey.DURATION)
    assert [s.duration for s in m.get_general_playlist().get_songs()] == [9, 20, 100]


def test_sort_twice_is_idempotent(songs):
    m = PlaylistManager()
    for s in songs:
        m.add_song_to_general(s)
    m.sort_songs_by(SortKey.TITLE)
    once = m.get_general_playlist().get_songs()
    m.sort_songs_by(SortKey.TITLE)
    assert m.get_general_playlist().get_songs() == once


def test_sort_unknown_key_raises():
    with pytest.raises(ValueError):
        PlaylistManager().sort_songs_by("tempo")


def test_get_playlist_by_kind():
    m = PlaylistManager()
    assert m.get_playlist(PlaylistKind.GENERAL) is m.get_general_playlist()
    assert m.get_playlist(PlaylistKind.FAVORITES) is m.get_favorites_playlist()


def test_dump_on_change_logs_details(imagine, caplog):
    m = PlaylistManager(dump_on_change=True)
    with caplog.at_level(logging.DEBUG, logger="core.playlist"):
        m.add_song_to_general(imagine)
    assert "General Playlist:\nImagine by John Lennon (Rock, 183 seconds)" in caplog.text
    assert "Favorites Playlist:" in caplog.text
