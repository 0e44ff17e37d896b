"""
Notice Board — Command Line
=============================

Usage:
    python -m noticeboard serve [--host HOST] [--port PORT] [--reload]
    python -m noticeboard board [--api-url URL]

`serve` runs the API under uvicorn; the process exits non-zero if the notice
store cannot be reached at startup. `board` opens the terminal client against
a running API.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from noticeboard import __version__
from noticeboard.config import settings
from noticeboard.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="noticeboard", description="Notice board service and terminal client.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default=settings.backend_host, help="Interface to bind (BACKEND_HOST)")
    serve.add_argument("--port", type=int, default=settings.backend_port, help="Port to listen on (BACKEND_PORT)")
    serve.add_argument("--reload", action="store_true", help="Restart on code changes (development)")

    board = sub.add_parser("board", help="Open the terminal notice board")
    board.add_argument("--api-url", default=settings.api_base_url, help="Base URL of the notice API (API_BASE_URL)")
    board.add_argument("--log-level", default="WARNING", help="Log level for client diagnostics on stderr")

    return parser


def serve(args: argparse.Namespace) -> None:
    import uvicorn

    setup_logging(settings.log_level)
    # log_config=None keeps uvicorn on the root handler installed above
    uvicorn.run(
        "noticeboard.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


def board(args: argparse.Namespace) -> int:
    from noticeboard.ui.app import run_board

    setup_logging(args.log_level, stream=sys.stderr)
    try:
        asyncio.run(run_board(args.api_url))
    except KeyboardInterrupt:
        return 130
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        serve(args)
        return 0
    return board(args)


if __name__ == "__main__":
    sys.exit(main())
