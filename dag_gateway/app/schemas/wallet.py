"""
Pydantic models for the gateway's HTTP bodies.

``SendDagRequest`` keeps every field optional: a missing ``to`` or
``amount`` must produce the gateway's own 400 response rather than
FastAPI's default 422 validation error.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class BalanceRead(BaseModel):
    address: str = Field(..., examples=["DAG0y4eLqhhXUafeE3mgBstezPTnr8L3tZjAtMWB"])
    balance: float = Field(..., examples=[125.5])


class SendDagRequest(BaseModel):
    """Body of ``POST /send-dag``.

    ``amount`` may be a number or a numeric string.  ``memo`` may be a
    string or any JSON value; non-string memos are serialised to JSON
    before submission.
    """

    to: Optional[str] = Field(None, description="Destination DAG address")
    # Strict number types so that JSON booleans are not read as 1 or 0.
    amount: Optional[Union[StrictInt, StrictFloat, str]] = Field(None, description="Amount in DAG")
    memo: Optional[Any] = Field(None, description="Optional memo attached to the transfer")


class SendDagResponse(BaseModel):
    success: bool = True
    tx: Dict[str, Any]


class DagDataResponse(BaseModel):
    """Documents recovered from the wallet's transaction memos."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    total_transactions: int = Field(..., alias="totalTransactions")
    documents: List[Any]
