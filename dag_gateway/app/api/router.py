"""
Top‑level router for the gateway.

When new endpoint modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import documents, health, wallet

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(wallet.router, tags=["wallet"])
router.include_router(documents.router, tags=["documents"])
