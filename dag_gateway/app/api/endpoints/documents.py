"""
Document endpoint.

``GET /dag-data`` walks the wallet's whole transaction history and
returns the documents recovered from transaction memos.  A failure
fetching any page fails the whole request; no partial list is sent.
"""

from fastapi import APIRouter, Depends, status

from dag_gateway.app.core.config import Settings, get_settings
from dag_gateway.app.core.errors import GatewayError, UpstreamFetchError
from dag_gateway.app.core.session import get_ledger_client
from dag_gateway.app.ledger.client import LedgerClient
from dag_gateway.app.schemas.wallet import DagDataResponse
from dag_gateway.app.services.document_service import DocumentService

router = APIRouter()


@router.get("/dag-data", response_model=DagDataResponse)
async def get_dag_data(
    client: LedgerClient = Depends(get_ledger_client),
    settings: Settings = Depends(get_settings),
) -> DagDataResponse:
    """Return ``totalTransactions`` and the decoded ``documents``."""
    try:
        batch = await DocumentService.build_documents(
            client,
            page_size=settings.dag_data_page_size,
            max_pages=settings.dag_data_max_pages,
        )
    except UpstreamFetchError as e:
        raise GatewayError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to fetch DAG data: {e}"
        )
    return DagDataResponse(
        success=True,
        total_transactions=batch.total_transactions,
        documents=batch.documents,
    )
