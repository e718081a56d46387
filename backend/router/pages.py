import logging
from pathlib import Path

from fastapi import HTTPException
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

def render_page(template_name: str, **context) -> HTMLResponse:
    try:
        html = env.get_template(template_name).render(**context)
    except TemplateError:
        logger.exception("Error rendering template %s", template_name)
        raise HTTPException(status_code=500, detail="Internal Server Error: Could not render page.")

    return HTMLResponse(content=html)
