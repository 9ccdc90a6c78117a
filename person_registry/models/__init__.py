"""SQLAlchemy ORM models.

Models represent database tables:
- person: the managed person records
"""

from person_registry.models.person import Person

__all__ = ["Person"]
