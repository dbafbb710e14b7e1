"""Queue-daemon backend adapter using python-mpd2."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mpd import MPDClient, MPDError

from mctl.errors import BackendCallFailed
from mctl.models import BackendKind, PlaybackState
from mctl.status import PlayerInfo, from_mpd, mpd_state

from .absent_backend import AbsentBackend
from .player_backend import PlayerBackend

logger = logging.getLogger(__name__)

_NATIVE_ERRORS = (MPDError, OSError)


class MPDBackend:
    """Playback controls over one connected `MPDClient`."""

    kind = BackendKind.MPD

    def __init__(self, client: Any) -> None:
        self._client = client

    @property
    def available(self) -> bool:
        return True

    def play(self) -> None:
        self._call("play", self._client.play)

    def pause(self) -> None:
        # `pause 1` always engages pause, so repeating it is harmless.
        self._call("pause", self._client.pause, 1)

    def toggle(self) -> None:
        self._call("toggle", self._client.pause)

    def next(self) -> None:
        self._call("next", self._client.next)

    def prev(self) -> None:
        self._call("prev", self._client.previous)

    def stop(self) -> None:
        self._call("stop", self._client.stop)

    def status(self) -> PlayerInfo:
        current_song = self._call("status", self._client.currentsong)
        status = self._call("status", self._client.status)
        return from_mpd(current_song, status)

    def playback_state(self) -> PlaybackState:
        return mpd_state(self._call("status", self._client.status))

    def is_running(self) -> bool:
        return True

    def close(self) -> None:
        try:
            self._client.close()
        except _NATIVE_ERRORS as exc:
            logger.debug("Ignoring MPD close error: %s", exc)
        self._client.disconnect()

    def _call(self, action: str, func: Callable[..., Any], *args: Any) -> Any:
        logger.debug("MPD %s", action)
        try:
            return func(*args)
        except _NATIVE_ERRORS as exc:
            raise BackendCallFailed(self.kind, action, exc) from exc


def connect_mpd(
    host: str,
    port: int,
    *,
    client_factory: Callable[[], Any] = MPDClient,
) -> PlayerBackend:
    """Connect to MPD, returning an absent adapter when it is unreachable."""
    client = client_factory()
    try:
        client.connect(host, port)
    except _NATIVE_ERRORS as exc:
        logger.info("MPD unavailable at %s:%s: %s", host, port, exc)
        return AbsentBackend(BackendKind.MPD)
    logger.debug("Connected to MPD at %s:%s", host, port)
    return MPDBackend(client)
