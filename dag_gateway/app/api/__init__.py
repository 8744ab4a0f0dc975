"""
HTTP routes of the gateway.

``router`` aggregates the endpoint routers in ``endpoints``.  Routes
are mounted at the application root to keep the paths clients already
call (``/balance``, ``/send-dag``, ``/dag-data``).
"""
