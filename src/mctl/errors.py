"""Error taxonomy surfaced at the process boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BackendKind


class MctlError(Exception):
    """Base class for errors reported to the user with a non-zero exit."""


class UnknownOperation(MctlError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Unknown operation: {raw!r}")
        self.raw = raw


class InvalidBackendChoice(MctlError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Unknown player: {raw!r}")
        self.raw = raw


class BackendCallFailed(MctlError):
    """A call on a connected backend failed in the native client."""

    def __init__(self, backend: BackendKind, action: str, cause: BaseException) -> None:
        super().__init__(f"{backend.label} {action} failed: {cause}")
        self.backend = backend
        self.action = action
        self.cause = cause


class BackendCallsFailed(MctlError):
    """More than one targeted backend failed during the same operation."""

    def __init__(self, failures: list[BackendCallFailed]) -> None:
        super().__init__("; ".join(str(failure) for failure in failures))
        self.failures = failures
