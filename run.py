"""Entry point for serving the User Management API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``user_management_api.app.core.config``) and can be overridden on the
command line.

Usage:
    python run.py [--host 127.0.0.1] [--port 8080] [--reload]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from user_management_api.app.core.config import settings
from user_management_api.app.core.logging_config import setup_logging


APP_PATH = "user_management_api.app.main:app"


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the User Management API.")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Restart the server when code changes")
    return ap.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Run the API with Uvicorn until it is stopped."""
    # log_config=None keeps uvicorn from installing its own handlers.
    config = Config(app=APP_PATH, host=host, port=port, log_config=None, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(settings.log_level, settings.log_file)
    if args.reload:
        # Reload mode needs uvicorn's own supervisor process.
        import uvicorn

        uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=True, log_config=None)
        return
    try:
        asyncio.run(serve(args.host, args.port))
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
