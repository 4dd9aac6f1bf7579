"""Screen rendering for the six resume templates."""
from resume_studio.rendering.engine import (
    NEUTRAL_FIT,
    FitParameters,
    RenderedLayout,
    render,
)
from resume_studio.rendering.layouts import LAYOUTS, TemplateLayout, get_layout
from resume_studio.rendering.view import ResumeView, build_view

__all__ = [
    "LAYOUTS",
    "NEUTRAL_FIT",
    "FitParameters",
    "RenderedLayout",
    "ResumeView",
    "TemplateLayout",
    "build_view",
    "get_layout",
    "render",
]
