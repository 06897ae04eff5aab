"""EcoSmart Application Package — personal carbon footprint tracking backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
