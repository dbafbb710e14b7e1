"""Session-bus backend adapter speaking MPRIS2 through dbus-python."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from mctl.errors import BackendCallFailed
from mctl.models import BackendKind, PlaybackState
from mctl.status import PlayerInfo, from_mpris, mpris_state

from .absent_backend import AbsentBackend
from .player_backend import PlayerBackend

logger = logging.getLogger(__name__)

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"
PROPERTIES_IFACE = "org.freedesktop.DBus.Properties"

# Active-player preference when several players share the session bus.
_ACTIVE_ORDER = ("playing", "paused")


class MprisBackend:
    """Playback controls for one MPRIS player on the session bus."""

    kind = BackendKind.MPRIS

    def __init__(
        self,
        bus: Any,
        service_name: str,
        *,
        error_type: type[BaseException] = Exception,
    ) -> None:
        self.service_name = service_name
        self._bus = bus
        self._proxy = bus.get_object(service_name, MPRIS_PATH)
        self._error_type = error_type

    @property
    def available(self) -> bool:
        return True

    def play(self) -> None:
        self._player_call("Play")

    def pause(self) -> None:
        self._player_call("Pause")

    def toggle(self) -> None:
        self._player_call("PlayPause")

    def next(self) -> None:
        self._player_call("Next")

    def prev(self) -> None:
        self._player_call("Previous")

    def stop(self) -> None:
        self._player_call("Stop")

    def status(self) -> PlayerInfo:
        metadata = self._get_property("Metadata")
        playback_status = self._get_property("PlaybackStatus")
        return from_mpris(metadata, playback_status)

    def playback_state(self) -> PlaybackState:
        return mpris_state(self._get_property("PlaybackStatus"))

    def is_running(self) -> bool:
        try:
            return bool(self._bus.name_has_owner(self.service_name))
        except self._error_type as exc:
            logger.debug(
                "MPRIS liveness probe failed for %s: %s", self.service_name, exc
            )
            return False

    def close(self) -> None:
        return None

    def _player_call(self, method: str) -> None:
        logger.debug("MPRIS %s on %s", method, self.service_name)
        self._invoke(
            method,
            lambda: getattr(self._proxy, method)(dbus_interface=PLAYER_IFACE),
        )

    def _get_property(self, name: str) -> Any:
        return self._invoke(
            "status",
            lambda: self._proxy.Get(
                PLAYER_IFACE, name, dbus_interface=PROPERTIES_IFACE
            ),
        )

    def _invoke(self, action: str, call: Callable[[], Any]) -> Any:
        try:
            return call()
        except self._error_type as exc:
            raise BackendCallFailed(self.kind, action, exc) from exc


def select_active_player(
    bus: Any,
    service_names: Iterable[str],
    *,
    error_type: type[BaseException] = Exception,
) -> PlayerBackend:
    """Pick the active player: first playing, else first paused, else first found."""
    candidates: list[tuple[MprisBackend, PlaybackState]] = []
    for name in service_names:
        if not str(name).startswith(MPRIS_PREFIX):
            continue
        try:
            backend = MprisBackend(bus, str(name), error_type=error_type)
            state = backend.playback_state()
        except (BackendCallFailed, error_type) as exc:
            logger.debug("Skipping MPRIS player %s: %s", name, exc)
            continue
        candidates.append((backend, state))

    if not candidates:
        logger.info("No MPRIS player found on the session bus")
        return AbsentBackend(BackendKind.MPRIS)
    for wanted in _ACTIVE_ORDER:
        for backend, state in candidates:
            if state == wanted:
                return backend
    return candidates[0][0]


def discover_mpris() -> PlayerBackend:
    """Find the active MPRIS player, returning an absent adapter if there is none."""
    try:
        import dbus
    except ImportError as exc:
        logger.info("dbus-python unavailable; MPRIS backend disabled: %s", exc)
        return AbsentBackend(BackendKind.MPRIS)

    error_type = dbus.exceptions.DBusException
    try:
        bus = dbus.SessionBus()
        names = [str(name) for name in bus.list_names()]
    except error_type as exc:
        logger.info("Session bus unavailable: %s", exc)
        return AbsentBackend(BackendKind.MPRIS)
    return select_active_player(bus, names, error_type=error_type)
