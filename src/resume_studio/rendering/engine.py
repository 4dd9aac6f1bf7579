"""Template rendering engine: ResumeDocument + locale -> scaled HTML page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from resume_studio.locales import Locale
from resume_studio.models.resume import ResumeDocument, TemplateId
from resume_studio.rendering.layouts import LAYOUTS, TemplateLayout, get_layout
from resume_studio.rendering.view import ResumeView, build_view

logger = logging.getLogger(__name__)

HTML_TEMPLATES_DIR = Path(__file__).parent / "html_templates"


@dataclass(frozen=True)
class FitParameters:
    """Layout-time variables consumed by every template stylesheet."""

    scale: float = 1.0
    spacing: float = 1.0

    def css_variables(self) -> Markup:
        return Markup("--fit-scale: {};\n  --fit-spacing: {};").format(self.scale, self.spacing)


NEUTRAL_FIT = FitParameters()


@dataclass(frozen=True)
class RenderedLayout:
    html: str
    template_id: TemplateId
    locale: str
    fit: FitParameters
    has_sidebar: bool


_env = Environment(
    loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class TemplateRenderer:
    """Renders one template variant from a prepared view."""

    layout: TemplateLayout

    def render(self, view: ResumeView, fit: FitParameters = NEUTRAL_FIT) -> str:
        template = _env.get_template(self.layout.html_template)
        return template.render(view=view, layout=self.layout, fit=fit)


RENDERERS: dict[TemplateId, TemplateRenderer] = {
    template_id: TemplateRenderer(layout) for template_id, layout in LAYOUTS.items()
}


def render(
    document: ResumeDocument,
    locale: Locale | str = "en",
    fit: FitParameters = NEUTRAL_FIT,
) -> RenderedLayout:
    """Render ``document`` with the template its ``template_id`` selects."""
    layout = get_layout(document.template_id)
    view = build_view(document, locale)
    html = RENDERERS[layout.template_id].render(view, fit)
    logger.debug(
        "Rendered %s template (scale=%.3f, spacing=%.3f)",
        layout.template_id.value,
        fit.scale,
        fit.spacing,
    )
    return RenderedLayout(
        html=html,
        template_id=layout.template_id,
        locale=view.locale.code,
        fit=fit,
        has_sidebar=layout.has_sidebar,
    )
