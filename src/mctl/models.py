"""Shared operation and backend vocabulary.

Text parsing is case-insensitive and whitespace tolerant so the CLI and the
config file resolve the same spelling to the same value.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from .errors import InvalidBackendChoice, UnknownOperation

PlaybackState = Literal["playing", "paused", "stopped"]


class Operation(Enum):
    """One playback command requested by the user."""

    PLAY = "play"
    PAUSE = "pause"
    TOGGLE = "toggle"
    NEXT = "next"
    PREV = "prev"
    STOP = "stop"
    STATUS = "status"

    @classmethod
    def parse(cls, raw: str) -> Operation:
        normalized = raw.strip().lower()
        for operation in cls:
            if operation.value == normalized:
                return operation
        raise UnknownOperation(raw)


class BackendKind(Enum):
    """Backend identity or an aggregate resolver answer."""

    MPD = "mpd"
    MPRIS = "mpris"
    BOTH = "both"
    NONE = "none"

    @property
    def label(self) -> str:
        return self.value.upper() if self in _SINGLE_BACKENDS else self.value

    @classmethod
    def parse_choice(cls, raw: str) -> BackendKind:
        """Parse a `--player` value; `none` is not a user choice."""
        normalized = raw.strip().lower()
        for kind in _SINGLE_BACKENDS + (cls.BOTH,):
            if kind.value == normalized:
                return kind
        raise InvalidBackendChoice(raw)

    @classmethod
    def parse_priority(cls, raw: str) -> BackendKind:
        """Parse the config `priority` value, which also accepts `none`."""
        normalized = raw.strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise InvalidBackendChoice(raw)

    def targets(self) -> tuple[BackendKind, ...]:
        """Return the concrete backends this value dispatches to."""
        if self is BackendKind.BOTH:
            return _SINGLE_BACKENDS
        if self is BackendKind.NONE:
            return ()
        return (self,)


_SINGLE_BACKENDS = (BackendKind.MPD, BackendKind.MPRIS)

OPERATION_NAMES = tuple(operation.value for operation in Operation)
PLAYER_CHOICES = ("mpd", "mpris", "both")
