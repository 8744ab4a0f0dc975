"""
Main entrypoint for the DAG Gateway.

This module assembles the FastAPI application, sets up logging,
registers the error handler and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn dag_gateway.app.main:app --reload

The ledger session is opened in the startup hook and kept on
``app.state.ledger_session``.  Tests pass a prepared session to
``create_app`` instead.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import GatewayError, gateway_error_handler, validation_error_handler
from .core.logging_config import setup_logging
from .core.session import LedgerSession, open_session


def create_app(
    settings: Optional[Settings] = None,
    session: Optional[LedgerSession] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module settings.
    session : Optional[LedgerSession]
        A ready-made ledger session.  When omitted, the session is
        opened from ``settings`` at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.ledger_session = session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.ledger_session is None:
            app.state.ledger_session = open_session(settings)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.ledger_session is not None:
            await app.state.ledger_session.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
