"""
Server-side HTML rendering
"""

from functools import lru_cache
from typing import Any, Dict

import jinja2
from fastapi import Depends
from fastapi.templating import Jinja2Templates
from markupsafe import Markup, escape

from rsvp.core.config import Settings, get_settings
from rsvp.utils.errors import TemplateNotFoundError, TemplateRenderError

def description_html(description: str) -> Markup:
    """Escape free text and turn each newline into a line break"""
    return Markup("<br />").join(escape(line) for line in description.split("\n"))

class PageRenderer:
    """Renders the named Jinja2 templates to bytes"""

    def __init__(self, template_dir: str):
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir),
            autoescape=jinja2.select_autoescape(["html"]),
            undefined=jinja2.StrictUndefined,
        )
        env.filters["description_html"] = description_html
        self.templates = Jinja2Templates(env=env)

    def render(self, name: str, context: Dict[str, Any]) -> bytes:
        try:
            template = self.templates.get_template(name)
        except jinja2.TemplateNotFound as e:
            raise TemplateNotFoundError(name) from e
        except jinja2.TemplateError as e:
            raise TemplateRenderError() from e

        try:
            return template.render(context).encode("utf-8")
        except jinja2.TemplateError as e:
            raise TemplateRenderError() from e

@lru_cache(maxsize=None)
def renderer_for(template_dir: str) -> PageRenderer:
    return PageRenderer(template_dir)

def get_renderer(settings: Settings = Depends(get_settings)) -> PageRenderer:
    return renderer_for(settings.TEMPLATE_DIR)
