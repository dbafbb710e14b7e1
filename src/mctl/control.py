"""Backend resolution and operation dispatch.

`Control` owns one adapter per backend. An unreachable backend is represented
by an absent adapter, so dispatch never branches on connectivity.

Partial failures: every targeted adapter is attempted. A single failure is
re-raised as-is; several failures are raised together as `BackendCallsFailed`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import Config
from .errors import BackendCallFailed, BackendCallsFailed
from .models import BackendKind, Operation
from .services.mpd_backend import connect_mpd
from .services.mpris_backend import discover_mpris
from .services.player_backend import PlayerBackend
from .status import PlayerInfo

logger = logging.getLogger(__name__)


class Control:
    """Routes operations to the MPD and MPRIS adapters."""

    def __init__(
        self,
        *,
        mpd: PlayerBackend,
        mpris: PlayerBackend,
        priority: BackendKind = BackendKind.MPD,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.mpd = mpd
        self.mpris = mpris
        self.priority = priority
        self._echo = echo

    @classmethod
    def with_config(
        cls, config: Config, *, echo: Callable[[str], None] = print
    ) -> Control:
        """Connect both adapters; unreachable backends become absent adapters."""
        mpd = connect_mpd(config.mpd_host, config.mpd_port)
        mpris = discover_mpris()
        logger.debug(
            "Backends available: mpd=%s mpris=%s", mpd.available, mpris.available
        )
        return cls(
            mpd=mpd,
            mpris=mpris,
            priority=config.priority,
            echo=echo,
        )

    def player(self) -> BackendKind:
        """Resolve which backend(s) are active right now.

        A playing MPD wins; a paused MPD never combines with MPRIS.
        """
        mpd_playing = self.mpd.playback_state() == "playing"
        mpris_running = self.mpris.is_running()
        if mpd_playing and mpris_running:
            resolved = BackendKind.BOTH
        elif mpd_playing:
            resolved = BackendKind.MPD
        elif mpris_running:
            resolved = BackendKind.MPRIS
        else:
            resolved = BackendKind.NONE
        logger.debug(
            "Resolved backend %s (mpd_playing=%s, mpris_running=%s, priority=%s)",
            resolved.value,
            mpd_playing,
            mpris_running,
            self.priority.value,
        )
        return resolved

    def handle(self, operation: Operation, backend: BackendKind) -> None:
        logger.debug("Handling %s for %s", operation.value, backend.value)
        handlers: dict[Operation, Callable[[], None]] = {
            Operation.PLAY: lambda: self.play(backend),
            Operation.PAUSE: self.pause,
            Operation.TOGGLE: self.toggle,
            Operation.NEXT: lambda: self.next(backend),
            Operation.PREV: lambda: self.prev(backend),
            Operation.STOP: self.stop,
            Operation.STATUS: lambda: self.status(backend),
        }
        handlers[operation]()

    def play(self, backend: BackendKind) -> None:
        self._run(self._targets(backend), lambda adapter: adapter.play())

    def pause(self) -> None:
        self._run(self._adapters(), lambda adapter: adapter.pause())

    def toggle(self) -> None:
        self._run(self._adapters(), lambda adapter: adapter.toggle())

    def next(self, backend: BackendKind) -> None:
        self._run(self._targets(backend), lambda adapter: adapter.next())

    def prev(self, backend: BackendKind) -> None:
        self._run(self._targets(backend), lambda adapter: adapter.prev())

    def stop(self) -> None:
        self._run(self._adapters(), lambda adapter: adapter.stop())

    def status(self, backend: BackendKind) -> None:
        """Print one status block per targeted backend as soon as it is read."""
        printed = False

        def show(adapter: PlayerBackend) -> None:
            nonlocal printed
            info: PlayerInfo | None = adapter.status()
            if info is None:
                return
            if printed:
                self._echo("")
            self._echo(info.render())
            printed = True

        self._run(self._targets(backend), show)

    def close(self) -> None:
        for adapter in self._adapters():
            adapter.close()

    def __enter__(self) -> Control:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _adapters(self) -> list[PlayerBackend]:
        return [self.mpd, self.mpris]

    def _targets(self, backend: BackendKind) -> list[PlayerBackend]:
        by_kind = {BackendKind.MPD: self.mpd, BackendKind.MPRIS: self.mpris}
        return [by_kind[kind] for kind in backend.targets()]

    def _run(
        self,
        adapters: list[PlayerBackend],
        action: Callable[[PlayerBackend], None],
    ) -> None:
        failures: list[BackendCallFailed] = []
        for adapter in adapters:
            try:
                action(adapter)
            except BackendCallFailed as exc:
                logger.debug("%s", exc)
                failures.append(exc)
        if len(failures) == 1:
            raise failures[0]
        if failures:
            raise BackendCallsFailed(failures)
