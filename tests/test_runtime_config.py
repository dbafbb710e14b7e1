"""Tests for runtime config precedence behavior."""

from __future__ import annotations

from mctl.config import Config
from mctl.models import BackendKind
from mctl.runtime_config import apply_overrides, resolve_log_level


def test_resolve_log_level_precedence_matrix() -> None:
    assert resolve_log_level(verbose=False, quiet=False) == "WARNING"
    assert resolve_log_level(verbose=True, quiet=False) == "DEBUG"
    assert resolve_log_level(verbose=False, quiet=True) == "ERROR"
    assert resolve_log_level(verbose=True, quiet=True) == "ERROR"


def test_cli_overrides_take_precedence_over_config() -> None:
    config = Config(mpd_host="a", mpd_port=1, priority=BackendKind.BOTH)
    assert apply_overrides(config, host="b", port=2) == Config(
        mpd_host="b", mpd_port=2, priority=BackendKind.BOTH
    )


def test_missing_or_blank_overrides_keep_config() -> None:
    config = Config(mpd_host="a", mpd_port=1)
    assert apply_overrides(config) == config
    assert apply_overrides(config, host="   ") == config
