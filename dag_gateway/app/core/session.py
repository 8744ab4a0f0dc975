"""
Ledger session state.

The session is opened once when the application starts and is stored
on ``app.state``.  Request handlers reach it through the FastAPI
dependencies defined here instead of consulting a module level flag,
so a test (or a future reconnect) can swap the session without
touching global state.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from .config import Settings
from .errors import NotReadyError
from ..ledger.client import LedgerClient

logger = logging.getLogger(__name__)

# "DAG" + parity digit + 36 base58 characters.
_DAG_ADDRESS_RE = re.compile(r"^DAG[0-9][1-9A-HJ-NP-Za-km-z]{36}$")


@dataclass
class LedgerSession:
    """Outcome of the startup login step."""

    ready: bool
    client: Optional[LedgerClient] = None
    error: Optional[str] = None

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()


def is_valid_address(address: str) -> bool:
    return bool(_DAG_ADDRESS_RE.match(address or ""))


def open_session(settings: Settings) -> LedgerSession:
    """Configure the ledger network and bind the gateway wallet.

    Any configuration problem yields a session that is not ready; the
    reason is logged and kept on the session.  There is no retry.
    """
    missing = [
        name
        for name, value in (
            ("DAG_L0_URL", settings.l0_url),
            ("DAG_L1_URL", settings.l1_url),
            ("DAG_BE_URL", settings.be_url),
            ("DAG_SIGNER_URL", settings.signer_url),
        )
        if not value
    ]
    if missing:
        error = f"Missing ledger configuration: {', '.join(missing)}"
        logger.error(error)
        return LedgerSession(ready=False, error=error)
    if not is_valid_address(settings.address):
        error = f"Invalid or missing DAG_ADDRESS: {settings.address!r}"
        logger.error(error)
        return LedgerSession(ready=False, error=error)

    client = LedgerClient(
        address=settings.address,
        l0_url=settings.l0_url,
        l1_url=settings.l1_url,
        be_url=settings.be_url,
        signer_url=settings.signer_url,
        network_id=settings.network_id,
        timeout=settings.ledger_timeout,
    )
    logger.info(
        "Ledger session ready on %s (version %s) for %s",
        settings.network_id,
        settings.network_version,
        settings.address,
    )
    return LedgerSession(ready=True, client=client)


def get_ledger_session(request: Request) -> LedgerSession:
    session = getattr(request.app.state, "ledger_session", None)
    if session is None:
        return LedgerSession(ready=False, error="Ledger session not initialised")
    return session


def get_ledger_client(session: LedgerSession = Depends(get_ledger_session)) -> LedgerClient:
    """Return the session's client, or fail with 503 if not ready."""
    if not session.ready or session.client is None:
        raise NotReadyError()
    return session.client
