"""Core: pure domain types, rules, messages and errors.

Invariants:
    - No IO, no framework imports (FastAPI, SQLAlchemy) in this package
"""
