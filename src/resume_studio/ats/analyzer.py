"""Heuristic ATS-compatibility scoring over extracted resume text.

The analyzer is a pure function of the text, the file name and the scoring
configuration: the same input always yields the same AtsResult.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from resume_studio.config import AtsConfig
from resume_studio.models.ats import AtsBreakdown, AtsDetails, AtsResult

logger = logging.getLogger(__name__)

SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "experience": re.compile(
        r"\b(experience|employment|work history|expérience|experiencia)\b"
    ),
    "education": re.compile(
        r"\b(education|academic|qualifications|formation|educación|formación)\b"
    ),
    "skills": re.compile(r"\b(skills|competencies|technologies|compétences|habilidades)\b"),
    "projects": re.compile(r"\b(projects|portfolio|projets|proyectos)\b"),
    "summary": re.compile(r"\b(summary|objective|about me|profil|perfil|resumen)\b"),
}

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE_PATTERN = re.compile(
    r"(?:\+\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{3,4}\b"
    r"|(?:\+\d{1,3}[\s.-]?)?\b\d{1,2}(?:[\s.]\d{2}){4}\b"
)
PROFILE_PATTERN = re.compile(r"linkedin\.com/in/[\w%-]+")

ACTION_VERBS = (
    "managed",
    "developed",
    "led",
    "created",
    "implemented",
    "designed",
    "improved",
    "increased",
    "reduced",
    "launched",
    "achieved",
    "coordinated",
    "analyzed",
    "delivered",
)
_VERB_PATTERNS = {verb: re.compile(rf"\b{verb}\b") for verb in ACTION_VERBS}

STRENGTHS = {
    "sections": "Uses standard section headings that ATS parsers recognize.",
    "keywords": "Good use of action verbs to describe achievements.",
    "formatting": "Text is machine-readable.",
    "skills": "Includes a dedicated skills section.",
    "email": "Email address found.",
    "phone": "Phone number found.",
    "profile": "LinkedIn profile found.",
}

IMPROVEMENTS = {
    "sections": "Add the missing standard sections: {missing}.",
    "keywords": "Use more action verbs (managed, developed, led...) to describe your impact.",
    "formatting": "Very little text could be read. Avoid images, text boxes and unusual fonts.",
    "skills": "Add a dedicated skills section listing your key competencies.",
    "email": "Add a professional email address.",
    "phone": "Add a phone number so recruiters can reach you.",
    "profile": "Add a link to your LinkedIn profile.",
    "length": "Content is too short. Aim for at least {min_words} words.",
}


def analyze_text(text: str, file_name: str = "", config: AtsConfig | None = None) -> AtsResult:
    """Score extracted resume text for ATS compatibility."""
    cfg = config or AtsConfig()
    lowered = text.lower()

    found = [name for name, pattern in SECTION_PATTERNS.items() if pattern.search(lowered)]
    missing = [name for name in SECTION_PATTERNS if name not in found]

    has_email = bool(EMAIL_PATTERN.search(text))
    has_phone = bool(PHONE_PATTERN.search(text))
    has_profile = bool(PROFILE_PATTERN.search(lowered))

    keyword_count = sum(1 for pattern in _VERB_PATTERNS.values() if pattern.search(lowered))
    word_count = len(text.split())
    readable = len(text) >= cfg.min_text_length
    has_skills = "skills" in found

    breakdown = AtsBreakdown(
        sections=len(found) / len(SECTION_PATTERNS) * cfg.section_points,
        keywords=min(keyword_count / cfg.keyword_cap * cfg.keyword_points, cfg.keyword_points),
        formatting=cfg.formatting_points if readable else 0,
        skills=cfg.skills_points if has_skills else cfg.skills_fallback_points,
        clarity=(
            (cfg.email_points if has_email else 0)
            + (cfg.phone_points if has_phone else 0)
            + (cfg.profile_points if has_profile else 0)
        ),
    )
    score = round(
        breakdown.sections
        + breakdown.keywords
        + breakdown.formatting
        + breakdown.skills
        + breakdown.clarity
    )

    strengths: list[str] = []
    improvements: list[str] = []

    def feedback(key: str, ok: bool) -> None:
        if ok:
            strengths.append(STRENGTHS[key])
        else:
            improvements.append(IMPROVEMENTS[key])

    if len(found) >= cfg.strong_sections:
        strengths.append(STRENGTHS["sections"])
    else:
        improvements.append(IMPROVEMENTS["sections"].format(missing=", ".join(missing)))
    feedback("keywords", keyword_count >= cfg.strong_keywords)
    feedback("formatting", readable)
    feedback("skills", has_skills)
    feedback("email", has_email)
    feedback("phone", has_phone)
    feedback("profile", has_profile)
    if word_count < cfg.min_word_count:
        improvements.append(IMPROVEMENTS["length"].format(min_words=cfg.min_word_count))

    result = AtsResult(
        score=score,
        breakdown=breakdown,
        strengths=strengths,
        improvements=improvements,
        details=AtsDetails(
            word_count=word_count,
            found_sections=found,
            missing_sections=missing,
            contact_info_found=has_email or has_phone,
            file_type=Path(file_name).suffix.lower().lstrip(".") if file_name else "",
        ),
    )
    logger.info(
        "ATS score %d for %s (sections=%d/5, verbs=%d, words=%d)",
        score,
        file_name or "<text>",
        len(found),
        keyword_count,
        word_count,
    )
    return result
