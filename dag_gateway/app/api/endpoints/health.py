"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    """Return a plain text liveness message.  Does not touch the ledger."""
    return "DAG Gateway is running ✅"
