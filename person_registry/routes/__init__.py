"""HTML routes."""

from fastapi import APIRouter

from person_registry.routes import home, persons

api_router = APIRouter()

# Landing page
api_router.include_router(home.router, tags=["home"])

# Person forms (save, select, delete, update, list)
api_router.include_router(persons.router, tags=["persons"])
