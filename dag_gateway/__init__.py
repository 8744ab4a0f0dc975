"""
Top‑level package for the DAG Gateway.

All functionality lives in submodules under ``app``; import the
ASGI application as ``dag_gateway.app.main:app``.
"""

__all__ = []
