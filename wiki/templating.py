import logging
from dataclasses import dataclass
from pathlib import Path
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Template, TemplateError

from wiki.common.exceptions import TemplateRenderException
from wiki.pages.schemas import Page

logger = logging.getLogger(__name__)

PAGE_TEMPLATE_NAMES = ("view", "edit")


@dataclass(frozen=True)
class PageRenderer:
    """Presentation templates compiled once at startup, keyed by view name."""

    templates: dict[str, Template]

    def render(self, name: str, page: Page) -> HTMLResponse:
        template = self.templates.get(name)
        if template is None:
            raise TemplateRenderException(name, f"Unknown template '{name}'")

        # Render fully before building the response so a failure leaves
        # nothing half-written.
        try:
            content = template.render(page=page)
        except TemplateError as e:
            raise TemplateRenderException(name, str(e)) from e

        return HTMLResponse(content)


def load_page_renderer(templates_dir: str | Path) -> PageRenderer:
    jinja_templates = Jinja2Templates(directory=str(templates_dir))
    compiled: dict[str, Template] = {}
    for name in PAGE_TEMPLATE_NAMES:
        try:
            compiled[name] = jinja_templates.get_template(f"{name}.html")
        except TemplateError as e:
            raise RuntimeError(
                f"Failed to load template '{name}.html' from {templates_dir}: {e}"
            ) from e

    logger.info(f"Loaded page templates from {templates_dir}")
    return PageRenderer(templates=compiled)


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.page_renderer
