"""Core Layer — pure domain logic for custom fields and article create requests.

Invariants:
    - No IO, no framework imports (FastAPI, SQLAlchemy, pydantic) below this package
    - Everything here is synchronous and deterministic

Design Decisions:
    - Functional core / imperative shell: services/ runs the IO around these functions
"""
