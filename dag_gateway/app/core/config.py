"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults point at the public Constellation
IntegrationNet load balancers so that a development instance starts
without any configuration besides the wallet address.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from fastapi import Request


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "DAG Gateway")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5001"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Ledger network.  The L0 node answers balance queries, the L1 node
    # accepts signed transactions and the block explorer serves the
    # paginated transaction history.
    network_id: str = os.getenv("DAG_NETWORK_ID", "IntegrationNet")
    l0_url: str = os.getenv("DAG_L0_URL", "https://l0-lb-integrationnet.constellationnetwork.io")
    l1_url: str = os.getenv("DAG_L1_URL", "https://l1-lb-integrationnet.constellationnetwork.io")
    be_url: str = os.getenv("DAG_BE_URL", "https://be-integrationnet.constellationnetwork.io")
    network_version: str = os.getenv("DAG_NETWORK_VERSION", "2.0")

    # Wallet address the gateway operates on.  Private keys never reach
    # the gateway: transfers are signed by the service at ``signer_url``.
    address: str = os.getenv("DAG_ADDRESS", "")
    signer_url: str = os.getenv("DAG_SIGNER_URL", "http://127.0.0.1:9000")

    # Seconds before an upstream ledger call is abandoned.
    ledger_timeout: float = float(os.getenv("LEDGER_TIMEOUT", "30"))

    dag_data_page_size: int = int(os.getenv("DAG_DATA_PAGE_SIZE", "100"))
    # Upper bound on pages walked per /dag-data request.  Unset means
    # the walk continues for as long as upstream returns a cursor.
    dag_data_max_pages: Optional[int] = _optional_int("DAG_DATA_MAX_PAGES")

    default_memo: str = os.getenv("DEFAULT_MEMO", "DAG Gateway Transfer")

    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return getattr(request.app.state, "settings", settings)
