from __future__ import annotations

import argparse
import logging
import sys

import orjson

from .api import serialize_calendar
from .bootstrap import configure_logging
from .config import get_settings
from .data import JsonEventRepository
from .services import ServiceContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Salon Calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the admin calendar window.")

    list_parser = subparsers.add_parser("list", help="Print the calendar items as JSON.")
    list_parser.add_argument("--narrow", action="store_true", help="Use narrow-viewport titles.")

    serve_parser = subparsers.add_parser("serve", help="Serve the events API from the local JSON store.")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    return parser


def _list_events(narrow: bool) -> int:
    context = ServiceContext()
    controller = context.create_controller()
    try:
        controller.mount()
    finally:
        context.close()
    if controller.load_error:
        print(f"error: {controller.load_error}", file=sys.stderr)
        return 1
    sys.stdout.write(orjson.dumps(serialize_calendar(controller.events, narrow=narrow), option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")
    return 0


def main() -> None:
    configure_logging()
    logging.getLogger(__name__).info("Salon Calendar CLI starting")
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
    elif args.command == "list":
        sys.exit(_list_events(args.narrow))
    elif args.command == "serve":
        from .services.http import run_local_server

        settings = get_settings()
        run_local_server(
            JsonEventRepository(settings.storage.local_path),
            host=args.host or settings.server.host,
            port=args.port or settings.server.port,
            token=settings.server.token,
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
