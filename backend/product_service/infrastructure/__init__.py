"""Imperative Shell: database session management, storage adapter, logging setup.

Invariants:
    - Only this package (and models/) imports SQLAlchemy engine/session APIs
    - SQLAlchemy exceptions never escape; they surface as core.errors.DatabaseError
"""
