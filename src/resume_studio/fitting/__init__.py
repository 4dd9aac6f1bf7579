"""One-page auto-fit: measure a rendered layout and adjust scale or spacing."""
from resume_studio.fitting.autofit import AutoFitScaler, FitResult, FitSession
from resume_studio.fitting.measure import (
    EstimatingMeasurer,
    Measurer,
    WeasyPrintMeasurer,
    safe_measure,
)

__all__ = [
    "AutoFitScaler",
    "EstimatingMeasurer",
    "FitResult",
    "FitSession",
    "Measurer",
    "WeasyPrintMeasurer",
    "safe_measure",
]
