"""Landing page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from person_registry.templating import templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/Home", response_class=HTMLResponse, include_in_schema=False)
async def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "home.html")
