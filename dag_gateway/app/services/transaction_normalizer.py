"""
Single access point for a transaction's memo.

The memo may live at the top level of the record, under
``transactionOriginal.value`` or under ``transactionOriginal``,
depending on which ledger API version produced it.  Locations are
checked in that order and the first non-empty memo wins.
"""

from typing import Any, Optional

from ..schemas.transaction import RawTransaction


def extract_memo(tx: Any) -> Optional[str]:
    """Return the memo of ``tx`` (a :class:`RawTransaction` or raw record)."""
    tx = RawTransaction.from_raw(tx)
    if tx.memo:
        return tx.memo
    original = tx.transactionOriginal
    if original is None:
        return None
    if original.value is not None and original.value.memo:
        return original.value.memo
    if original.memo:
        return original.memo
    return None
