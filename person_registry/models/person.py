"""Person model.

The single managed record: caller-supplied id, required name, optional age.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from person_registry.stores.database import Base


class Person(Base):
    """Person record keyed by a caller-supplied id."""

    __tablename__ = "person"

    id: Mapped[str] = mapped_column(String(30), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Person {self.id} ({self.name})>"
