"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
      (used by create_schema and alembic/env.py)
"""

from app.models.model import Model  # noqa: F401
