"""Infrastructure Layer: database wiring, repositories and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are mapped to DatabaseError (core/errors.py) here
"""
