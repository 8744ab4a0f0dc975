"""
Endpoint modules.

Each module defines an APIRouter for one concern.  The routers are
aggregated in ``router.py`` and included in the application.
"""
