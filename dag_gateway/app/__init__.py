"""
Application package initializer.

The gateway is organised like any small FastAPI service: ``core``
holds configuration, logging, errors and the ledger session,
``ledger`` the client for the external ledger network, ``schemas``
the pydantic models, ``services`` the business logic and ``api`` the
HTTP routes.
"""

from .main import app  # noqa: F401
