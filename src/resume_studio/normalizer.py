"""Chronological ordering applied before every render and export.

``normalize`` never mutates its input; it returns a new document whose
timeline collections are ordered current-first, then by end date descending,
then by start date descending. Certifications are ordered by date descending.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from dateutil import parser as dateutil_parser

from resume_studio.models.resume import Certification, ResumeDocument

EPOCH = date(1970, 1, 1)
_DEFAULT = datetime(1970, 1, 1)

# "2021.03" would otherwise be read as a decimal number
_NUMERIC_DOT = re.compile(r"(?<=\d)\.(?=\d)")


class _ResumeParserInfo(dateutil_parser.parserinfo):
    """English month names plus the French and Spanish forms."""

    JUMP = dateutil_parser.parserinfo.JUMP + ["de", "del"]
    MONTHS = [
        ("Jan", "January", "janv", "janvier", "ene", "enero"),
        ("Feb", "February", "fev", "févr", "fevrier", "février", "febrero"),
        ("Mar", "March", "mars", "marzo"),
        ("Apr", "April", "avr", "avril", "abr", "abril"),
        ("May", "mai", "mayo"),
        ("Jun", "June", "juin", "junio"),
        ("Jul", "July", "juil", "juillet", "julio"),
        ("Aug", "August", "aout", "août", "ago", "agosto"),
        ("Sep", "Sept", "September", "septembre", "septiembre"),
        ("Oct", "October", "octobre", "octubre"),
        ("Nov", "November", "novembre", "noviembre"),
        ("Dec", "December", "déc", "decembre", "décembre", "dic", "diciembre"),
    ]


_PARSER_INFO = _ResumeParserInfo()


def parse_date(value: str) -> date:
    """Parse a loosely formatted resume date; unparsable values map to EPOCH.

    Missing month or day components default to January and the 1st.
    """
    text = _NUMERIC_DOT.sub("-", (value or "").strip())
    if not text:
        return EPOCH
    try:
        return dateutil_parser.parse(text, default=_DEFAULT, parserinfo=_PARSER_INFO).date()
    except (ValueError, OverflowError):
        return EPOCH


def _timeline_key(entry) -> tuple:
    # sorted(..., reverse=True): current entries first, then newest end, then newest start.
    # A current entry's end date is stale by definition.
    end = EPOCH if entry.current else parse_date(entry.end_date)
    return (entry.current, end, parse_date(entry.start_date))


def _certification_key(cert: Certification) -> date:
    return parse_date(cert.date)


def normalize(document: ResumeDocument) -> ResumeDocument:
    """Return a copy of ``document`` in display order."""
    return document.model_copy(
        update={
            "experience": tuple(sorted(document.experience, key=_timeline_key, reverse=True)),
            "education": tuple(sorted(document.education, key=_timeline_key, reverse=True)),
            "custom_items": tuple(
                sorted(document.custom_items, key=_timeline_key, reverse=True)
            ),
            "certifications": tuple(
                sorted(document.certifications, key=_certification_key, reverse=True)
            ),
        }
    )
