"""API Layer: FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All responses except 204 carry JSON bodies
"""
