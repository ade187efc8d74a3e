"""Entry point for the Social Media API.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example in Docker where only a single
Python file is specified::

    python run.py

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables.  Application settings (``DATABASE_URL``,
``LOG_LEVEL`` and so on) are read by ``social_media_api.app.core.config``.
"""
import asyncio
import os

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted.

    Defaults are ``0.0.0.0`` and ``8080``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8080"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
