# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from locationbook.app import (
    add_location,
    list_locations,
    remove_location,
    suggest_locations,
    update_location,
)
from locationbook.config import ConfigurationError, configure_logging
from locationbook.domain.errors import LocationBookError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and bookmark locations")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List catalog and custom locations")
    list_cmd.add_argument(
        "--offline",
        action="store_true",
        help="Skip the connectivity probe and read only the local cache",
    )

    add = subparsers.add_parser("add", help="Bookmark a custom location")
    add.add_argument("name", type=str)
    add.add_argument("latitude", type=float)
    add.add_argument("longitude", type=float)

    update = subparsers.add_parser("update", help="Edit a custom location")
    update.add_argument("location_id", type=str)
    update.add_argument("--name", type=str, help="New display name")
    update.add_argument("--latitude", type=float, help="New latitude")
    update.add_argument("--longitude", type=float, help="New longitude")

    remove = subparsers.add_parser("remove", help="Delete a custom location")
    remove.add_argument("location_id", type=str)

    suggest = subparsers.add_parser("suggest", help="Suggest places for a partial name")
    suggest.add_argument("query", type=str)

    return parser.parse_args(list(argv))


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value}") from exc


def _run(args: argparse.Namespace) -> None:
    if args.command == "list":
        for location in list_locations(offline=args.offline):
            print(f"{location.name}\t{location.latitude}\t{location.longitude}\t{location.source}")
    elif args.command == "add":
        created = add_location(args.name, args.latitude, args.longitude)
        print(created.id)
    elif args.command == "update":
        updated = update_location(
            _parse_uuid(args.location_id),
            name=args.name,
            latitude=args.latitude,
            longitude=args.longitude,
        )
        print(f"{updated.id}\t{updated.name}\t{updated.latitude}\t{updated.longitude}")
    elif args.command == "remove":
        remove_location(_parse_uuid(args.location_id))
    elif args.command == "suggest":
        for preview in suggest_locations(args.query):
            print(f"{preview.name}\t{preview.latitude}\t{preview.longitude}")
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)

    try:
        _run(parsed_args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except (LocationBookError, ConfigurationError) as exc:
        log.debug("Command failed", exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
