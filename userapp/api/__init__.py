"""API Layer — FastAPI routes, rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate to the dispatcher; no storage access from this layer
"""
