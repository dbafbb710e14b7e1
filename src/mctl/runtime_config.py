"""Runtime configuration normalization helpers.

These helpers keep CLI flag interpretation deterministic.
"""

from __future__ import annotations

from .config import Config


def resolve_log_level(*, verbose: bool, quiet: bool) -> str:
    """Resolve effective log level from CLI flags.

    Precedence is deterministic: --quiet overrides --verbose. The default
    keeps routine invocations silent apart from their own output.
    """
    if quiet:
        return "ERROR"
    if verbose:
        return "DEBUG"
    return "WARNING"


def apply_overrides(
    config: Config, *, host: str | None = None, port: int | None = None
) -> Config:
    """Return `config` with CLI connection overrides applied."""
    return Config(
        mpd_host=host.strip() if host and host.strip() else config.mpd_host,
        mpd_port=port if port is not None else config.mpd_port,
        priority=config.priority,
    )
