"""
Turns controller view results into HTTP responses.
"""
from pathlib import Path

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from controllers import Redirect, Render

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def to_response(request: Request, result: Render | Redirect) -> Response:
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.url, status_code=result.status_code)
    return templates.TemplateResponse(
        request, result.template, result.context, status_code=result.status_code
    )
