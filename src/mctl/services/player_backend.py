"""Capability protocol shared by every backend adapter.

`Control` depends only on this protocol. The concrete adapters (MPD, MPRIS)
translate each call into their native client API and wrap native failures in
`BackendCallFailed`; the absent adapter turns every call into a no-op.
"""

from __future__ import annotations

from typing import Protocol

from mctl.models import BackendKind, PlaybackState
from mctl.status import PlayerInfo


class PlayerBackend(Protocol):
    """Playback controls for one backend."""

    kind: BackendKind

    @property
    def available(self) -> bool: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def toggle(self) -> None: ...

    def next(self) -> None: ...

    def prev(self) -> None: ...

    def stop(self) -> None: ...

    def status(self) -> PlayerInfo | None: ...

    def playback_state(self) -> PlaybackState: ...

    def is_running(self) -> bool: ...

    def close(self) -> None: ...
