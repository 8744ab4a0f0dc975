"""
Business logic for the ``/dag-data`` endpoint.

Fetches the wallet's full transaction history, picks out each
transaction's memo and decodes it into a document.  Transactions
without a memo produce no document but still count towards
``total_transactions``.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.errors import UpstreamFetchError, describe_error
from ..schemas.transaction import RawTransaction
from .memo_decoder import decode
from .pagination import DEFAULT_PAGE_SIZE, TransactionSource, fetch_all_transactions
from .transaction_normalizer import extract_memo

logger = logging.getLogger(__name__)


@dataclass
class DocumentBatch:
    total_transactions: int
    documents: List[Any]


class DocumentService:
    """Builds documents from transaction memos."""

    @staticmethod
    def documents_from(transactions: List[Any]) -> List[Any]:
        """Decode the memo of every transaction that has one, in order."""
        documents: List[Any] = []
        for record in transactions:
            tx = RawTransaction.from_raw(record)
            memo = extract_memo(tx)
            if memo is None:
                continue
            documents.append(decode(memo, tx.hash))
        return documents

    @classmethod
    async def build_documents(
        cls,
        source: TransactionSource,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
    ) -> DocumentBatch:
        """Fetch all transactions and decode their memos.

        Any failure while fetching is raised as
        :class:`UpstreamFetchError`; nothing is returned for the pages
        that did arrive.  Memo decoding never fails.
        """
        try:
            transactions = await fetch_all_transactions(source, page_size=page_size, max_pages=max_pages)
        except Exception as exc:
            logger.error("Failed to fetch transaction history: %s", exc)
            raise UpstreamFetchError(describe_error(exc)) from exc
        documents = cls.documents_from(transactions)
        logger.info(
            "Recovered %d documents from %d transactions", len(documents), len(transactions)
        )
        return DocumentBatch(total_transactions=len(transactions), documents=documents)
