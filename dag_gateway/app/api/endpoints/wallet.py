"""
Wallet endpoints.

``GET /balance`` reports the gateway wallet's balance and
``POST /send-dag`` transfers DAG from it.  Both answer 503 while the
ledger session is not ready.  Failures are reported as
``{"success": false, "error": ...}``.
"""

import logging

from fastapi import APIRouter, Depends, status

from dag_gateway.app.core.config import Settings, get_settings
from dag_gateway.app.core.errors import (
    GatewayError,
    InsufficientFundsError,
    InvalidRequestError,
    describe_error,
)
from dag_gateway.app.core.session import get_ledger_client
from dag_gateway.app.ledger.client import LedgerClient
from dag_gateway.app.schemas.wallet import BalanceRead, SendDagRequest, SendDagResponse
from dag_gateway.app.services.wallet_service import WalletService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/balance", response_model=BalanceRead)
async def get_balance(client: LedgerClient = Depends(get_ledger_client)) -> BalanceRead:
    """Return the wallet address and its balance in DAG."""
    try:
        return await WalletService.get_balance(client)
    except Exception as e:
        logger.error("Failed to fetch balance: %s", e)
        raise GatewayError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch balance.")


@router.post("/send-dag", response_model=SendDagResponse)
async def send_dag(
    body: SendDagRequest,
    client: LedgerClient = Depends(get_ledger_client),
    settings: Settings = Depends(get_settings),
) -> SendDagResponse:
    """Send DAG to ``to``.

    ``to`` and ``amount`` are required.  The amount must not exceed the
    current balance.  A memo that is not a string is sent as JSON; no
    memo means the configured default memo.
    """
    if not body.to or body.amount is None or body.amount == "" or body.amount == 0:
        raise GatewayError(
            status.HTTP_400_BAD_REQUEST, "Missing required fields: 'to' or 'amount'."
        )
    try:
        tx = await WalletService.send_dag(
            client, body.to, body.amount, body.memo, default_memo=settings.default_memo
        )
    except (InvalidRequestError, InsufficientFundsError) as e:
        raise GatewayError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        logger.exception("Transfer to %s failed", body.to)
        raise GatewayError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Transaction failed: {describe_error(e, 'Unknown transaction error')}",
        )
    return SendDagResponse(success=True, tx=tx)
