"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Repositories implement the Protocols in core/repository_protocols.py
    - ORM rows never leave this package: they are converted to core types first

Design Decisions:
    - One plain class per repository, constructed per request around an AsyncSession
"""
