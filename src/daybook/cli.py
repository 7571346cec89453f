from __future__ import annotations

import argparse
import logging

import orjson

from .bootstrap import configure_logging
from .config import get_settings
from .services.http import run_local_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daybook command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server exposing the event store.")
    serve_parser.add_argument("--host", default=None, help="Override the host from DAYBOOK_HTTP_ADDRESS.")
    serve_parser.add_argument("--port", type=int, default=None, help="Override the port from DAYBOOK_HTTP_ADDRESS.")

    subparsers.add_parser("settings", help="Print the effective settings.")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "settings":
        print(orjson.dumps(get_settings().describe(), option=orjson.OPT_INDENT_2).decode())
        return

    configure_logging()
    logger = logging.getLogger(__name__)
    settings = get_settings()
    logger.info(
        "Loaded settings: address=%s timeout=%ss idle_timeout=%ss",
        settings.http.address,
        settings.http.timeout,
        settings.http.idle_timeout,
    )

    if args.command == "serve":
        run_local_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
