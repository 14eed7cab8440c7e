"""API Layer: FastAPI routes, dependencies and boundary error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All error bodies share the ErrorResponse shape

Design Decisions:
    - Thin routes: validate, call the service, render; no business logic here
"""
