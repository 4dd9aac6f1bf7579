"""Compile a resume into a standalone LaTeX source file (resume.tex)."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from resume_studio.locales import Locale
from resume_studio.models.resume import ResumeDocument, TemplateId
from resume_studio.rendering.layouts import get_layout
from resume_studio.rendering.view import build_view

logger = logging.getLogger(__name__)

TEX_TEMPLATES_DIR = Path(__file__).parent / "tex_templates"

# Template variants collapse into three typesetting families
FAMILIES: dict[TemplateId, str] = {
    TemplateId.MODERN: "modern",
    TemplateId.CREATIVE: "modern",
    TemplateId.CLASSIC: "classic",
    TemplateId.EXECUTIVE: "classic",
    TemplateId.PROFESSIONAL: "sidebar",
    TemplateId.MINIMAL: "sidebar",
}

_TEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
_TEX_PATTERN = re.compile(r"[\\&%$#_{}~^]")
_URL_PATTERN = re.compile(r"[%#]")


def escape_tex(value: object) -> str:
    """Escape LaTeX special characters in user text."""
    if value is None:
        return ""
    return _TEX_PATTERN.sub(lambda m: _TEX_SPECIALS[m.group(0)], str(value))


def escape_url(value: object) -> str:
    """Escape the characters hyperref cannot take verbatim inside \\href."""
    if value is None:
        return ""
    return _URL_PATTERN.sub(lambda m: "\\" + m.group(0), str(value))


def _build_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEX_TEMPLATES_DIR)),
        undefined=StrictUndefined,
        # LaTeX-safe delimiters so braces and percent signs stay literal
        variable_start_string="<<<",
        variable_end_string=">>>",
        block_start_string="<%%",
        block_end_string="%%>",
        comment_start_string="<#",
        comment_end_string="#>",
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["tex"] = escape_tex
    env.filters["tex_url"] = escape_url
    return env


_env = _build_env()


def compile_source(document: ResumeDocument, locale: Locale | str = "en") -> str:
    """Render ``document`` as LaTeX source.

    The output depends only on the document and locale, so compiling the
    same snapshot twice yields identical text.
    """
    layout = get_layout(document.template_id)
    family = FAMILIES[layout.template_id]
    view = build_view(document, locale)
    source = _env.get_template(f"{family}.tex.j2").render(view=view, layout=layout)
    logger.debug(
        "Compiled LaTeX source for %s (%s family, %d chars)",
        layout.template_id.value,
        family,
        len(source),
    )
    return source
