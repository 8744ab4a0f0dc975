"""
Business logic for balance lookup and DAG transfers.

Both operations are thin: the ledger client does the work.  The
transfer path validates the amount, checks it against the current
balance and normalises the memo before handing over.
"""

import json
import logging
import math
from typing import Any, Dict, Optional, Union

from ..core.errors import InsufficientFundsError, InvalidRequestError
from ..ledger.client import LedgerClient
from ..schemas.wallet import BalanceRead

logger = logging.getLogger(__name__)


def parse_amount(amount: Union[float, int, str]) -> float:
    """Convert a numeric or numeric-string amount to ``float``."""
    if isinstance(amount, bool):
        raise InvalidRequestError(f"Invalid amount: {amount!r}")
    if isinstance(amount, str):
        try:
            value = float(amount.strip())
        except ValueError:
            raise InvalidRequestError(f"Invalid amount: {amount!r}")
    else:
        value = float(amount)
    if math.isnan(value) or math.isinf(value) or value <= 0:
        raise InvalidRequestError(f"Invalid amount: {amount!r}")
    return value


def normalise_memo(memo: Any, default_memo: str) -> str:
    if memo is None or memo == "":
        return default_memo
    if isinstance(memo, str):
        return memo
    return json.dumps(memo, separators=(",", ":"), ensure_ascii=False)


class WalletService:
    """Balance and transfer operations for the gateway wallet."""

    @staticmethod
    async def get_balance(client: LedgerClient) -> BalanceRead:
        balance = await client.get_balance()
        return BalanceRead(address=client.address, balance=balance)

    @staticmethod
    async def send_dag(
        client: LedgerClient,
        to: str,
        amount: Union[float, int, str],
        memo: Optional[Any] = None,
        default_memo: str = "DAG Gateway Transfer",
    ) -> Dict[str, Any]:
        """Transfer ``amount`` DAG to ``to`` and return the receipt.

        Raises ``InvalidRequestError`` for an unusable amount and
        ``InsufficientFundsError`` when the amount exceeds the
        balance.  Ledger failures propagate.
        """
        value = parse_amount(amount)
        balance = await client.get_balance()
        if value > balance:
            raise InsufficientFundsError(
                f"Insufficient funds. Balance: {balance}, Requested: {value}"
            )
        tx = await client.transfer_dag(to, value, 0, True, memo=normalise_memo(memo, default_memo))
        logger.info("Transfer of %s DAG to %s accepted", value, to)
        return tx
