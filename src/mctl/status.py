"""Normalize backend-native status into one display record.

Both native shapes degrade to empty title/artists when metadata is missing
or malformed; only a failing native call is an error, and that is raised by
the adapter before these helpers run.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .models import BackendKind, PlaybackState

_MPD_STATES: dict[str, PlaybackState] = {
    "play": "playing",
    "pause": "paused",
    "stop": "stopped",
}
_MPRIS_STATES: dict[str, PlaybackState] = {
    "playing": "playing",
    "paused": "paused",
    "stopped": "stopped",
}


@dataclass(frozen=True)
class PlayerInfo:
    """Snapshot of what one backend is playing right now."""

    backend: BackendKind
    title: str = ""
    artists: tuple[str, ...] = field(default_factory=tuple)
    state: PlaybackState = "stopped"

    def render(self) -> str:
        if len(self.artists) <= 1:
            artist_line = f"Artist: {''.join(self.artists)}"
        else:
            artist_line = f"Artists: {', '.join(self.artists)}"
        return "\n".join(
            [
                f"Player: {self.backend.label}",
                f"State: {self.state.capitalize()}",
                f"Title: {self.title}",
                artist_line,
            ]
        )


def mpd_state(status: Mapping[str, Any] | None) -> PlaybackState:
    if not isinstance(status, Mapping):
        return "stopped"
    return _MPD_STATES.get(_text(status.get("state")).lower(), "stopped")


def from_mpd(
    current_song: Mapping[str, Any] | None, status: Mapping[str, Any] | None
) -> PlayerInfo:
    """Build `PlayerInfo` from `currentsong` and `status` responses.

    MPD repeats tags as lists; the first value is used for the title. Artists
    are left empty.
    """
    title = ""
    if isinstance(current_song, Mapping):
        title = _first_text(current_song.get("title"))
    return PlayerInfo(backend=BackendKind.MPD, title=title, state=mpd_state(status))


def mpris_state(playback_status: Any) -> PlaybackState:
    return _MPRIS_STATES.get(_text(playback_status).lower(), "stopped")


def from_mpris(metadata: Mapping[str, Any] | None, playback_status: Any) -> PlayerInfo:
    """Build `PlayerInfo` from MPRIS `Metadata` and `PlaybackStatus` values."""
    title = ""
    artists: tuple[str, ...] = ()
    if isinstance(metadata, Mapping):
        title = _first_text(metadata.get("xesam:title"))
        artists = _text_list(metadata.get("xesam:artist"))
    return PlayerInfo(
        backend=BackendKind.MPRIS,
        title=title,
        artists=artists,
        state=mpris_state(playback_status),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _first_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return _text(value[0]) if value else ""
    return _text(value)


def _text_list(value: Any) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(_text(item) for item in value if _text(item))
    if isinstance(value, str) and value:
        return (value,)
    return ()
