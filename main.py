"""Launcher for the arena bot HTTP service."""

import argparse

import uvicorn

from infra.logger import configure_logging, get_logger
from infra.settings import Settings


def main():
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Run the arena bot service.")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to listen on (default: {settings.port})")
    parser.add_argument(
        "--reload",
        dest="reload",
        action="store_true",
        default=False,
        help="Enable auto-reload for development (default: off)",
    )
    parser.add_argument(
        "--no-reload",
        dest="reload",
        action="store_false",
        help="Disable auto-reload",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: from LOG_LEVEL)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file under storage/logs")
    args = parser.parse_args()

    # Configure logging once at startup (console + optional file).
    configure_logging(level=args.log_level, json=settings.log_json, log_file=args.log_file)
    log = get_logger(__name__)

    log.info("starting server on %s:%s (agent=%s)", args.host, args.port, settings.agent)
    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
