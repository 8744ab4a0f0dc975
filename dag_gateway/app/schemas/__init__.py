"""
Pydantic schema definitions.

``transaction`` models the upstream transaction records the gateway
reads; ``wallet`` the request and response bodies of the HTTP API.
"""
