"""Model ORM: persists the single managed resource, an (id, name) record.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - name is non-nullable; non-blank is enforced before persisting
      (core/validate_model.py)

Design Decisions:
    - Table name "model" matches the entity name
    - sqlite_autoincrement: SQLite never reuses the id of a deleted row
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Model(Base):
    """Managed resource record."""
    __tablename__ = "model"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Model(id={self.id!r}, name={self.name!r})"
