"""Tests for operation and backend parsing."""

from __future__ import annotations

import pytest

from mctl.errors import InvalidBackendChoice, UnknownOperation
from mctl.models import BackendKind, Operation


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Play", Operation.PLAY),
        ("PAUSE", Operation.PAUSE),
        ("toggle", Operation.TOGGLE),
        (" next ", Operation.NEXT),
        ("Prev", Operation.PREV),
        ("stop", Operation.STOP),
        ("STATUS", Operation.STATUS),
    ],
)
def test_operation_parse_is_case_insensitive(raw: str, expected: Operation) -> None:
    assert Operation.parse(raw) is expected


def test_operation_parse_rejects_unknown_text() -> None:
    with pytest.raises(UnknownOperation) as excinfo:
        Operation.parse("nonsense")
    assert excinfo.value.raw == "nonsense"
    assert "nonsense" in str(excinfo.value)


def test_player_choice_parse_accepts_cli_values() -> None:
    assert BackendKind.parse_choice("MPD") is BackendKind.MPD
    assert BackendKind.parse_choice("Mpris") is BackendKind.MPRIS
    assert BackendKind.parse_choice("both") is BackendKind.BOTH


def test_player_choice_parse_rejects_none_and_garbage() -> None:
    with pytest.raises(InvalidBackendChoice):
        BackendKind.parse_choice("none")
    with pytest.raises(InvalidBackendChoice):
        BackendKind.parse_choice("vlc")


def test_priority_parse_accepts_none() -> None:
    assert BackendKind.parse_priority("None") is BackendKind.NONE
    assert BackendKind.parse_priority("both") is BackendKind.BOTH


def test_backend_targets() -> None:
    assert BackendKind.MPD.targets() == (BackendKind.MPD,)
    assert BackendKind.MPRIS.targets() == (BackendKind.MPRIS,)
    assert BackendKind.BOTH.targets() == (BackendKind.MPD, BackendKind.MPRIS)
    assert BackendKind.NONE.targets() == ()


def test_backend_labels() -> None:
    assert BackendKind.MPD.label == "MPD"
    assert BackendKind.MPRIS.label == "MPRIS"
