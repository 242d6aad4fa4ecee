"""Models API Package: CRUD HTTP service for Model records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
