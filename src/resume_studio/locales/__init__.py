from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel

from resume_studio.errors import UnsupportedLocaleError


class Headings(BaseModel):
    summary: str
    experience: str
    projects: str
    education: str
    certifications: str
    skills: str
    contact: str
    custom: str


class Labels(BaseModel):
    full_name: str
    job_title: str
    present: str
    link: str


class Locale(BaseModel):
    code: str
    name: str
    headings: Headings
    labels: Labels


LOCALES_DIR = Path(__file__).parent

SUPPORTED_LOCALES = ("en", "fr", "es")


@lru_cache(maxsize=None)
def load_locale(code: str) -> Locale:
    """Load the label set for a locale code."""
    if code not in SUPPORTED_LOCALES:
        raise UnsupportedLocaleError(
            f"Unsupported locale: {code!r} (expected one of {', '.join(SUPPORTED_LOCALES)})"
        )
    path = LOCALES_DIR / f"{code}.yaml"
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return Locale(**data)


def resolve_locale(locale: "Locale | str") -> Locale:
    return locale if isinstance(locale, Locale) else load_locale(locale)
