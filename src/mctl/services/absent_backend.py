"""Adapter for a backend that was unreachable at startup."""

from __future__ import annotations

from mctl.models import BackendKind, PlaybackState
from mctl.status import PlayerInfo


class AbsentBackend:
    """Every control is a successful no-op; status reports nothing."""

    def __init__(self, kind: BackendKind) -> None:
        self.kind = kind

    @property
    def available(self) -> bool:
        return False

    def play(self) -> None:
        return None

    def pause(self) -> None:
        return None

    def toggle(self) -> None:
        return None

    def next(self) -> None:
        return None

    def prev(self) -> None:
        return None

    def stop(self) -> None:
        return None

    def status(self) -> PlayerInfo | None:
        return None

    def playback_state(self) -> PlaybackState:
        return "stopped"

    def is_running(self) -> bool:
        return False

    def close(self) -> None:
        return None
