"""Person form pages.

GET  /save, /select, /delete      - empty forms
POST /save                        - create (upsert), redirect to /
POST /select, GET /view, /info/x  - show one person (/info/ accepts ids with slashes)
POST /delete                      - delete with result message
GET  /part_delete                 - delete, then show the list
GET  /selectAll                   - list everyone
GET  /update, POST /update        - edit form, apply edit and redirect to /view

Routers are thin: call services for business logic.
"""

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from person_registry.schemas import PersonIn
from person_registry.services.persons import person_service
from person_registry.stores.database import Database
from person_registry.templating import templates

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def get_database(request: Request) -> Database:
    """Database handle opened by the app lifespan."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Start the app through its lifespan.")
    return database


def person_form(
    person_id: str = Form(alias="id"),
    name: str = Form(),
    age: str = Form(default=""),
) -> PersonIn:
    """Map the save/update form fields onto PersonIn."""
    try:
        return PersonIn(id=person_id, name=name, age=age)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


async def _render_person(request: Request, database: Database, person_id: str) -> HTMLResponse:
    async with person_service(database) as service:
        person = await service.fetch(person_id)
    return templates.TemplateResponse(request, "select.html", {"id": person_id, "person": person})


@router.get("/test")
async def seed_test_record(database: Database = Depends(get_database)) -> RedirectResponse:
    """Store the sample person and go back to the landing page."""
    async with person_service(database) as service:
        await service.seed_test_record()
    return RedirectResponse(url="/", status_code=302)


@router.get("/save", response_class=HTMLResponse)
async def save_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "input_form.html")


@router.post("/save")
async def save(
    person: PersonIn = Depends(person_form),
    database: Database = Depends(get_database),
) -> RedirectResponse:
    logger.debug(f"[persons] save form: {person!r}")
    async with person_service(database) as service:
        await service.create(person)
    return RedirectResponse(url="/", status_code=303)


@router.get("/select", response_class=HTMLResponse)
async def select_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "select_form.html")


@router.post("/select", response_class=HTMLResponse)
async def select(
    request: Request,
    person_id: str = Form(alias="id", default=""),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    return await _render_person(request, database, person_id)


@router.get("/view", response_class=HTMLResponse)
async def view(
    request: Request,
    person_id: str = Query(alias="id"),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    return await _render_person(request, database, person_id)


@router.get("/info/{person_id:path}", response_class=HTMLResponse)
async def info(
    request: Request,
    person_id: str = Path(),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    return await _render_person(request, database, person_id)


@router.get("/delete", response_class=HTMLResponse)
async def delete_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "delete_form.html")


@router.post("/delete", response_class=HTMLResponse)
async def delete(
    request: Request,
    person_id: str = Form(alias="id"),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    async with person_service(database) as service:
        result = await service.remove(person_id)
    return templates.TemplateResponse(request, "delete.html", {"id": person_id, "result": result})


@router.get("/part_delete", response_class=HTMLResponse)
async def part_delete(
    request: Request,
    person_id: str = Query(alias="id"),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    """Delete a person and show the refreshed list in one round trip."""
    async with person_service(database) as service:
        await service.remove(person_id)
        persons = await service.list_all()
    return templates.TemplateResponse(request, "select_all.html", {"id": person_id, "persons": persons})


@router.get("/selectAll", response_class=HTMLResponse)
async def select_all(request: Request, database: Database = Depends(get_database)) -> HTMLResponse:
    async with person_service(database) as service:
        persons = await service.list_all()
    return templates.TemplateResponse(request, "select_all.html", {"persons": persons})


@router.get("/update", response_class=HTMLResponse)
async def update_form(
    request: Request,
    person_id: str = Query(alias="id"),
    database: Database = Depends(get_database),
) -> HTMLResponse:
    async with person_service(database) as service:
        person = await service.fetch(person_id)
    return templates.TemplateResponse(request, "update_form.html", {"id": person_id, "person": person})


@router.post("/update")
async def update(
    person: PersonIn = Depends(person_form),
    database: Database = Depends(get_database),
) -> RedirectResponse:
    """Apply the edit; unknown ids surface as PERSON_NOT_FOUND (404)."""
    logger.debug(f"[persons] update form: {person!r}")
    async with person_service(database) as service:
        await service.modify(person)
    return RedirectResponse(url=f"/view?{urlencode({'id': person.id})}", status_code=303)
