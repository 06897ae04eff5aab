"""Infrastructure Layer — datastore, external service clients, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never holds domain rules
    - All external calls wrapped with retry/timeout/error mapping
"""
