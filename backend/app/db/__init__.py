"""Database Metadata: SQLAlchemy declarative Base shared by ORM models and migrations.

Invariants:
    - One metadata object per process (Base.metadata)
"""
