"""Functional Core: pure domain logic with no IO.

Invariants:
    - Nothing in core imports from api, infrastructure, models or services
    - IO is reached only through the Protocols in repository_protocols.py
"""
