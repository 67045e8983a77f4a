"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services do the IO (repositories); core functions do the deciding
    - Services never commit: routes own the transaction boundary
"""
