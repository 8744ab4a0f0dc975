"""
Service layer.

The document pipeline is split into its parts (pagination, memo
normalisation and memo decoding) so each can be tested on its own;
``document_service`` composes them.  ``wallet_service`` covers the
balance and transfer endpoints.
"""
