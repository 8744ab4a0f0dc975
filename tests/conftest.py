"""
Shared fixtures for the gateway tests.

``FakeLedger`` stands in for :class:`LedgerClient`: it serves scripted
transaction pages and records every call, so tests can assert on both
the result and the exact request sequence.  No network is used.
"""

from __future__ import annotations

from typing import Any, List, Optional

import pytest
from fastapi.testclient import TestClient

from dag_gateway.app.core.config import Settings
from dag_gateway.app.core.session import LedgerSession
from dag_gateway.app.main import create_app

ADDRESS = "DAG0y4eLqhhXUafeE3mgBstezPTnr8L3tZjAtMWB"
DESTINATION = "DAG4rvZ1aEXTaZhm6BWVmjvMvjpVxcKuHRwp5mHs"


class FakeLedger:
    """Scripted ledger client."""

    def __init__(
        self,
        pages: Optional[List[Any]] = None,
        balance: float = 100.0,
        address: str = ADDRESS,
    ) -> None:
        self.pages = list(pages or [])
        self.balance = balance
        self.address = address
        self.calls: List[dict] = []
        self.transfers: List[dict] = []
        self.closed = False

    async def get_transactions(self, limit: int, cursor: Optional[str] = None) -> Any:
        self.calls.append({"limit": limit, "cursor": cursor})
        if not self.pages:
            raise AssertionError("unexpected extra page request")
        page = self.pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page

    async def get_balance(self) -> float:
        return self.balance

    async def transfer_dag(self, to, amount, fee=0, sign=True, memo=None) -> dict:
        transfer = {"to": to, "amount": amount, "fee": fee, "sign": sign, "memo": memo}
        self.transfers.append(transfer)
        return {"hash": "f" * 64, "destination": to, "amount": amount, "memo": memo}

    async def aclose(self) -> None:
        self.closed = True


def make_txs(count: int, start: int = 0) -> List[dict]:
    return [{"hash": f"h{i}", "amount": 1} for i in range(start, start + count)]


@pytest.fixture
def settings():
    return Settings(
        address=ADDRESS,
        default_memo="Test Transfer",
        dag_data_page_size=100,
        dag_data_max_pages=None,
    )


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def client(settings, ledger):
    """TestClient bound to an app with a ready session around ``ledger``."""
    app = create_app(settings=settings, session=LedgerSession(ready=True, client=ledger))
    return TestClient(app)


@pytest.fixture
def not_ready_client(settings):
    app = create_app(settings=settings, session=LedgerSession(ready=False, error="login failed"))
    return TestClient(app)
