"""Command-line interface for mctl."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import load_config
from .control import Control
from .errors import InvalidBackendChoice, MctlError, UnknownOperation
from .logging_utils import setup_logging
from .models import OPERATION_NAMES, PLAYER_CHOICES, BackendKind, Operation
from .paths import config_path, log_dir
from .runtime_config import apply_overrides, resolve_log_level
from .version import build_help_epilog


def _operation_arg(value: str) -> Operation:
    try:
        return Operation.parse(value)
    except UnknownOperation as exc:
        raise argparse.ArgumentTypeError(
            f"{exc} (choose from {', '.join(OPERATION_NAMES)})"
        ) from exc


def _player_arg(value: str) -> BackendKind:
    try:
        return BackendKind.parse_choice(value)
    except InvalidBackendChoice as exc:
        raise argparse.ArgumentTypeError(
            f"{exc} (choose from {', '.join(PLAYER_CHOICES)})"
        ) from exc


def _port_arg(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from exc
    if not 0 < port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mctl",
        description="Control MPD and MPRIS media players from one command.",
        epilog=build_help_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "operation",
        type=_operation_arg,
        metavar="{" + ",".join(OPERATION_NAMES) + "}",
        help="Playback operation (case-insensitive)",
    )
    parser.add_argument(
        "-p",
        "--player",
        type=_player_arg,
        metavar="{" + ",".join(PLAYER_CHOICES) + "}",
        help="Target player; detected from what is playing when omitted",
    )
    parser.add_argument("--host", help="MPD host (overrides config)")
    parser.add_argument("--port", type=_port_arg, help="MPD port (overrides config)")
    parser.add_argument("--config", help="Path to an alternate YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--quiet", action="store_true", help="Only show errors in the log output"
    )
    parser.add_argument("--log-file", help="Write logs to a file path")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)
    try:
        level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
        setup_logging(
            log_dir=log_dir(),
            level=level,
            log_file=Path(args.log_file) if args.log_file else None,
        )
        config = load_config(Path(args.config) if args.config else config_path())
        config = apply_overrides(config, host=args.host, port=args.port)
        with Control.with_config(config) as control:
            backend = args.player if args.player is not None else control.player()
            control.handle(args.operation, backend)
        return 0
    except MctlError as exc:
        logger.debug("Operation failed", exc_info=True)
        print(f"mctl: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Unhandled error: %s", exc)
        print("Unexpected error. Re-run with --verbose for details.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
