"""Data stores for persistence.

Stores handle:
- Database: engine, sessions, schema creation
- Persons: repository over the person table

No business logic in stores - that belongs in services.
"""
