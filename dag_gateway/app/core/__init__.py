"""Configuration, logging, error handling and ledger session state."""
