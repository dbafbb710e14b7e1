"""Tests for status normalization and rendering."""

from __future__ import annotations

from mctl.models import BackendKind
from mctl.status import (
    PlayerInfo,
    from_mpd,
    from_mpris,
    mpd_state,
    mpris_state,
)


def test_render_zero_artists_leaves_empty_artist_line() -> None:
    info = PlayerInfo(backend=BackendKind.MPD, title="Song", state="playing")
    assert info.render() == "Player: MPD\nState: Playing\nTitle: Song\nArtist: "


def test_render_single_artist() -> None:
    info = PlayerInfo(
        backend=BackendKind.MPRIS, title="Song", artists=("Bob",), state="paused"
    )
    assert info.render().splitlines()[-1] == "Artist: Bob"


def test_render_multiple_artists() -> None:
    info = PlayerInfo(backend=BackendKind.MPRIS, artists=("A", "B"), state="stopped")
    assert info.render() == "Player: MPRIS\nState: Stopped\nTitle: \nArtists: A, B"


def test_from_mpd_maps_title_and_state() -> None:
    info = from_mpd({"title": "Blue", "artist": "X"}, {"state": "pause"})
    assert info == PlayerInfo(backend=BackendKind.MPD, title="Blue", state="paused")
    assert info.artists == ()


def test_from_mpd_uses_first_repeated_tag() -> None:
    info = from_mpd({"title": ["One", "Two"]}, {"state": "play"})
    assert info.title == "One"
    assert info.state == "playing"


def test_from_mpd_degrades_on_missing_data() -> None:
    info = from_mpd({}, {})
    assert info.title == ""
    assert info.state == "stopped"
    assert from_mpd(None, None).state == "stopped"


def test_mpd_state_mapping() -> None:
    assert mpd_state({"state": "play"}) == "playing"
    assert mpd_state({"state": "pause"}) == "paused"
    assert mpd_state({"state": "stop"}) == "stopped"
    assert mpd_state({"state": "bogus"}) == "stopped"


def test_from_mpris_extracts_artist_list() -> None:
    metadata = {"xesam:title": "Track", "xesam:artist": ["A", "B"]}
    info = from_mpris(metadata, "Playing")
    assert info == PlayerInfo(
        backend=BackendKind.MPRIS, title="Track", artists=("A", "B"), state="playing"
    )


def test_from_mpris_degrades_on_missing_metadata() -> None:
    info = from_mpris({}, "Paused")
    assert info.title == ""
    assert info.artists == ()
    assert info.state == "paused"
    assert from_mpris(None, None).state == "stopped"


def test_from_mpris_accepts_single_artist_string() -> None:
    assert from_mpris({"xesam:artist": "Solo"}, "Stopped").artists == ("Solo",)


def test_mpris_state_mapping() -> None:
    assert mpris_state("Playing") == "playing"
    assert mpris_state("Paused") == "paused"
    assert mpris_state("Stopped") == "stopped"
