"""Services Layer — orchestration between core logic and infrastructure.

Invariants:
    - Services call core for every rule and infrastructure for every IO
    - Transaction commit happens here, never in repositories
"""
