from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .config import Settings
from .errors import ConfigurationError

logger = logging.getLogger("file_access")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    # stdout carries protocol messages in stdio mode.
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_settings() -> Settings | None:
    try:
        return Settings.from_env()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return None


def _stdio(args: argparse.Namespace) -> int:
    from .server import create_stdio_server

    settings = _load_settings()
    if settings is None:
        return 1
    logger.info("Allowed directory: %s", settings.allowed_directory)
    create_stdio_server(settings).serve()
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = _load_settings()
    if settings is None:
        return 1
    logger.info("Allowed directory: %s", settings.allowed_directory)
    uvicorn.run(
        "file_access.server:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=bool(args.reload),
        log_level=args.log_level,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-access-server",
        description="Expose read/write/list file tools confined to ALLOWED_DIRECTORY.",
    )
    parser.set_defaults(func=_stdio)
    subparsers = parser.add_subparsers(dest="command")

    stdio = subparsers.add_parser("stdio", help="Serve MCP over stdin/stdout (default).")
    stdio.set_defaults(func=_stdio)

    serve = subparsers.add_parser("serve", help="Run the FastAPI tools endpoint.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "info"))
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Enable uvicorn auto-reload (development only).",
    )
    serve.set_defaults(func=_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(os.getenv("LOG_LEVEL", "info"))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
