"""
Ledger network access.

The gateway talks to the DAG ledger exclusively through
:class:`~dag_gateway.app.ledger.client.LedgerClient`.  Consensus,
signing and transport are the ledger's concern; this package only
shapes requests and responses.
"""

from .client import LedgerClient

__all__ = ["LedgerClient"]
