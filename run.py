"""Entry point for serving the Social Media API.

Host, port and the database location are read from environment
variables (``API_HOST``, ``API_PORT``, ``DATABASE_URL``); see
``social_media_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
