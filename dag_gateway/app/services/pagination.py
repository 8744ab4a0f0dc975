"""
Walk the full transaction history of the gateway wallet.

The ledger client returns each page in one of two shapes: a bare list
of transactions, or an envelope ``{"data": [...], "cursor": token}``.
:func:`classify_page` decodes a response into :class:`BareList` or
:class:`Envelope` once; :func:`fetch_all_transactions` only ever sees
those two shapes.  A response matching neither ends the walk.

Pages are requested strictly one after another since the cursor for
the next page is only known once the current page has arrived.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class TransactionSource(Protocol):
    async def get_transactions(self, limit: int, cursor: Optional[str] = None) -> Any:
        ...


@dataclass(frozen=True)
class BareList:
    items: List[Any]

    @property
    def cursor(self) -> None:
        return None


@dataclass(frozen=True)
class Envelope:
    items: List[Any]
    cursor: Optional[Any] = field(default=None)


TransactionPage = Union[BareList, Envelope]


def has_cursor(cursor: Any) -> bool:
    # None, "", 0 and false all mean "no further pages".
    if cursor is None:
        return False
    if isinstance(cursor, (str, int, float)):
        return bool(cursor)
    return True


def classify_page(raw: Any) -> Optional[TransactionPage]:
    """Decode a raw page response, or return ``None`` for an unknown shape."""
    if isinstance(raw, list):
        return BareList(items=raw)
    if isinstance(raw, dict) and isinstance(raw.get("data"), list):
        cursor = raw.get("cursor")
        return Envelope(items=raw["data"], cursor=cursor if has_cursor(cursor) else None)
    return None


async def fetch_all_transactions(
    source: TransactionSource,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: Optional[int] = None,
) -> List[Any]:
    """Fetch every transaction, following cursors until none is left.

    The walk stops when a page carries no cursor, when a page is empty
    but still carries a cursor (an upstream echoing a stale cursor),
    when a response has an unrecognised shape, or after ``max_pages``
    pages if a bound is given.  Errors raised by ``source`` propagate.
    """
    transactions: List[Any] = []
    cursor: Optional[Any] = None
    pages = 0
    while True:
        raw = await source.get_transactions(limit=page_size, cursor=cursor)
        pages += 1
        page = classify_page(raw)
        if page is None:
            logger.warning("Unrecognised transaction page shape (%s); ending walk", type(raw).__name__)
            break

        transactions.extend(page.items)
        cursor = page.cursor
        logger.debug("Page %d: %d transactions, cursor=%r", pages, len(page.items), cursor)

        if not page.items and has_cursor(cursor):
            logger.warning("Empty page with cursor %r; ending walk", cursor)
            break
        if not has_cursor(cursor):
            break
        if max_pages is not None and pages >= max_pages:
            logger.warning("Stopped after %d pages with more history available", pages)
            break
    return transactions
