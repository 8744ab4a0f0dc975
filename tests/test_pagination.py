"""
Tests for the transaction history walk: page shapes, cursors, stop rules.
"""

from __future__ import annotations

import pytest

from conftest import FakeLedger, make_txs
from dag_gateway.app.services.pagination import (
    BareList,
    Envelope,
    classify_page,
    fetch_all_transactions,
)


class TestClassifyPage:

    def test_bare_list(self):
        page = classify_page([{"hash": "a"}])
        assert page == BareList(items=[{"hash": "a"}])
        assert page.cursor is None

    def test_envelope(self):
        assert classify_page({"data": [], "cursor": "c1"}) == Envelope(items=[], cursor="c1")

    def test_envelope_without_cursor(self):
        assert classify_page({"data": [1]}) == Envelope(items=[1], cursor=None)

    def test_empty_string_cursor_is_absent(self):
        assert classify_page({"data": [1], "cursor": ""}).cursor is None

    @pytest.mark.parametrize("cursor", [0, 0.0, False, None])
    def test_falsy_cursors_are_absent(self, cursor):
        assert classify_page({"data": [1], "cursor": cursor}).cursor is None

    def test_numeric_cursor_kept(self):
        assert classify_page({"data": [1], "cursor": 7}).cursor == 7

    @pytest.mark.parametrize("raw", [None, "text", 7, {"items": []}, {"data": "x"}, {"data": None}])
    def test_unknown_shapes(self, raw):
        assert classify_page(raw) is None


class TestFetchAll:

    @pytest.mark.asyncio
    async def test_three_pages(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(100), "cursor": "c1"},
            {"data": make_txs(100, start=100), "cursor": "c2"},
            {"data": []},
        ])
        txs = await fetch_all_transactions(ledger, page_size=100)
        assert len(txs) == 200
        assert len(ledger.calls) == 3
        assert [c["cursor"] for c in ledger.calls] == [None, "c1", "c2"]
        assert all(c["limit"] == 100 for c in ledger.calls)

    @pytest.mark.asyncio
    async def test_order_preserved(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(2), "cursor": "c1"},
            {"data": make_txs(2, start=2)},
        ])
        txs = await fetch_all_transactions(ledger)
        assert [t["hash"] for t in txs] == ["h0", "h1", "h2", "h3"]

    @pytest.mark.asyncio
    async def test_zero_cursor_ends_walk(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(2), "cursor": 0},
            {"data": make_txs(2, start=2)},
        ])
        txs = await fetch_all_transactions(ledger)
        assert len(txs) == 2
        assert len(ledger.calls) == 1

    @pytest.mark.asyncio
    async def test_empty_history(self):
        ledger = FakeLedger(pages=[[]])
        assert await fetch_all_transactions(ledger) == []
        assert len(ledger.calls) == 1

    @pytest.mark.asyncio
    async def test_stale_cursor_guard(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(3), "cursor": "c1"},
            {"data": [], "cursor": "c1"},
        ])
        txs = await fetch_all_transactions(ledger)
        assert len(txs) == 3
        assert len(ledger.calls) == 2

    @pytest.mark.asyncio
    async def test_first_page_empty_with_cursor(self):
        ledger = FakeLedger(pages=[{"data": [], "cursor": "c0"}])
        assert await fetch_all_transactions(ledger) == []
        assert len(ledger.calls) == 1

    @pytest.mark.asyncio
    async def test_bare_list_ends_walk(self):
        ledger = FakeLedger(pages=[make_txs(5)])
        txs = await fetch_all_transactions(ledger)
        assert len(txs) == 5
        assert len(ledger.calls) == 1

    @pytest.mark.asyncio
    async def test_bare_list_and_envelope_equivalent(self):
        items = make_txs(4)
        bare = await fetch_all_transactions(FakeLedger(pages=[list(items)]))
        envelope = await fetch_all_transactions(FakeLedger(pages=[{"data": list(items)}]))
        assert bare == envelope == items

    @pytest.mark.asyncio
    async def test_malformed_page_ends_walk(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(2), "cursor": "c1"},
            {"error": "unexpected"},
        ])
        txs = await fetch_all_transactions(ledger)
        assert len(txs) == 2
        assert len(ledger.calls) == 2

    @pytest.mark.asyncio
    async def test_max_pages_bound(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(1), "cursor": "c1"},
            {"data": make_txs(1, start=1), "cursor": "c2"},
            {"data": make_txs(1, start=2), "cursor": "c3"},
        ])
        txs = await fetch_all_transactions(ledger, max_pages=2)
        assert [t["hash"] for t in txs] == ["h0", "h1"]
        assert len(ledger.calls) == 2

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self):
        ledger = FakeLedger(pages=[
            {"data": make_txs(1), "cursor": "c1"},
            RuntimeError("connection reset"),
        ])
        with pytest.raises(RuntimeError, match="connection reset"):
            await fetch_all_transactions(ledger)
