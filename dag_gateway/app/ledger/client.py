"""
Client for the Constellation DAG ledger.

This module is the gateway's only point of contact with the ledger
network.  It exposes the three operations the rest of the application
relies on:

* :meth:`LedgerClient.get_balance` – wallet balance in DAG.
* :meth:`LedgerClient.transfer_dag` – submit a transfer.
* :meth:`LedgerClient.get_transactions` – one page of the wallet's
  transaction history.

Signing is not performed here.  A transfer is first sent to an
external signer service which holds the wallet key and returns a
signed transaction; the signed transaction is then posted to the L1
node.  All HTTP traffic goes through a single ``httpx.AsyncClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.errors import LedgerError

logger = logging.getLogger(__name__)

# 1 DAG = 10^8 datum, the ledger's smallest unit.
DATUM_PER_DAG = 100_000_000


def to_datum(amount: float) -> int:
    return int(round(amount * DATUM_PER_DAG))


def from_datum(amount: int | float) -> float:
    return amount / DATUM_PER_DAG


class LedgerClient:
    """Asynchronous client bound to one wallet address on one network."""

    def __init__(
        self,
        *,
        address: str,
        l0_url: str,
        l1_url: str,
        be_url: str,
        signer_url: str,
        network_id: str = "IntegrationNet",
        timeout: float = 30.0,
        http: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.address = address
        self.network_id = network_id
        self.l0_url = l0_url.rstrip("/")
        self.l1_url = l1_url.rstrip("/")
        self.be_url = be_url.rstrip("/")
        self.signer_url = signer_url.rstrip("/")
        self.http = http or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self.http.aclose()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Any:
        """Perform a request and return the decoded JSON body.

        Raises :class:`LedgerError` on transport failures and non-2xx
        responses.  The error message is taken from the upstream body
        where one is available.
        """
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = await self.http.request(method, url, params=params, json=json_body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = ""
            try:
                err_json = exc.response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("message") or err_json.get("detail") or err_json.get("error") or ""
                    if not isinstance(message, str):
                        message = str(message)
                if not message:
                    message = str(err_json)
            except ValueError:
                message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Ledger request failed (%s): %s", status, message)
            raise LedgerError(message, status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.error("Ledger request failed: %s", exc)
            raise LedgerError(str(exc) or type(exc).__name__) from exc
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise LedgerError(f"Invalid JSON from {url}") from exc

    # ------------------------------------------------------------------
    # Ledger operations
    # ------------------------------------------------------------------
    async def get_balance(self) -> float:
        """Return the wallet balance in DAG."""
        data = await self._request("GET", f"{self.l0_url}/dag/{self.address}/balance")
        if not isinstance(data, dict) or "balance" not in data:
            raise LedgerError("Unexpected balance response from L0 node")
        return from_datum(data["balance"])

    async def transfer_dag(
        self,
        to: str,
        amount: float,
        fee: float = 0,
        sign: bool = True,
        memo: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Transfer ``amount`` DAG from the gateway wallet to ``to``.

        The signer receives the transfer parameters in datum and
        returns the transaction body to submit.  The L1 node answers
        with the transaction hash, which is returned as part of the
        receipt together with the submitted fields.
        """
        request = {
            "source": self.address,
            "destination": to,
            "amount": to_datum(amount),
            "fee": to_datum(fee),
            "sign": sign,
            "memo": memo,
            "networkId": self.network_id,
        }
        signed = await self._request("POST", f"{self.signer_url}/sign", json_body=request)
        if not isinstance(signed, dict):
            raise LedgerError("Signer returned no transaction")
        submitted = await self._request("POST", f"{self.l1_url}/transactions", json_body=signed)
        tx_hash = submitted.get("hash") if isinstance(submitted, dict) else None
        logger.info("Submitted transfer of %s DAG to %s (hash=%s)", amount, to, tx_hash)
        return {
            "hash": tx_hash,
            "source": self.address,
            "destination": to,
            "amount": amount,
            "fee": fee,
            "memo": memo,
        }

    async def get_transactions(self, limit: int, cursor: Optional[str] = None) -> Any:
        """Fetch one page of the wallet's transaction history.

        The block explorer answers with ``{"data": [...], "meta":
        {"next": <token>}}``; that shape is reduced to the envelope
        ``{"data": [...], "cursor": <token>}``.  Any other body is
        returned as received.
        """
        params: Dict[str, Any] = {"limit": limit}
        if cursor:
            params["search_after"] = cursor
        data = await self._request(
            "GET", f"{self.be_url}/addresses/{self.address}/transactions", params=params
        )
        if isinstance(data, dict) and isinstance(data.get("data"), list) and "cursor" not in data:
            meta = data.get("meta")
            next_cursor = meta.get("next") if isinstance(meta, dict) else None
            return {"data": data["data"], "cursor": next_cursor}
        return data
