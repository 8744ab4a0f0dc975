"""Entry point for the DAG Gateway.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5001``); all other configuration is described in
``dag_gateway.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from dag_gateway.app.core.config import settings
from dag_gateway.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
