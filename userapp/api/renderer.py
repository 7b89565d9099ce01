"""Renderer — writes a payload as JSON or as an HTML template, by content type.

Invariants:
    - content_type == "application/json" → compact JSON, status 200
    - anything else → Jinja2 template from template_dir, status 200
    - missing template → TemplateMissingError ("template not found: <name>")
    - This is the only place that branches on representation

Design Decisions:
    - Templates receive the payload as `data`, already converted to wire dicts,
      so list and single-record views index the same keys as the JSON form
"""

import logging
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse, JSONResponse, Response
from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from pydantic import BaseModel

from userapp.core.domain_types import JSON_CONTENT_TYPE
from userapp.core.errors import TemplateMissingError

logger = logging.getLogger(__name__)


def to_wire(payload: Any) -> Any:
    """Dump pydantic models (or lists of them) by alias; pass other values through."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True)
    if isinstance(payload, (list, tuple)):
        return [to_wire(item) for item in payload]
    return payload


class Renderer:
    """Content negotiation between JSON and server-rendered HTML."""

    def __init__(self, template_dir: Path | str):
        self.template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "tmpl"]),
        )

    def render(
        self, content_type: str | None, payload: Any, template_name: str,
    ) -> Response:
        data = to_wire(payload)
        if content_type == JSON_CONTENT_TYPE:
            return JSONResponse(content=data, status_code=200)

        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound:
            logger.error(
                f"Template '{template_name}' not found in {self.template_dir}",
            )
            raise TemplateMissingError(template_name)
        return HTMLResponse(content=template.render(data=data), status_code=200)
