"""Run the workout records API with uvicorn."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from app.config import get_settings
from app.logging_config import configure_logging


logger = logging.getLogger("server")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the workout records API")
    parser.add_argument("--host", default=settings.app_host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    return parser


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_dir)
    args = build_parser().parse_args(argv)

    logger.info("API is listening on port %d", args.port)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
