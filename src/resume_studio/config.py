"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "RESUME_STUDIO_CONFIG"


@dataclass(frozen=True)
class LayoutConfig:
    # A4 at the 96 dpi CSS reference resolution
    target_height_px: float = 1122.0
    shrink_floor: float = 0.6
    spacing_cap: float = 2.4
    tolerance: float = 0.01
    max_iterations: int = 20

    def __post_init__(self) -> None:
        if self.target_height_px <= 0:
            raise ValueError("target_height_px must be positive")
        if not 0.1 <= self.shrink_floor <= 1.0:
            raise ValueError("shrink_floor must be between 0.1 and 1.0")
        if not 1.0 <= self.spacing_cap <= 5.0:
            raise ValueError("spacing_cap must be between 1.0 and 5.0")
        if not 0.0 <= self.tolerance < 0.5:
            raise ValueError("tolerance must be between 0.0 and 0.5")
        if not 1 <= self.max_iterations <= 100:
            raise ValueError("max_iterations must be between 1 and 100")


@dataclass(frozen=True)
class AtsConfig:
    """Scoring weights and thresholds.

    These are heuristic calibration values, not derived constants. The five
    component maxima add up to 100.
    """

    section_points: float = 20.0
    keyword_points: float = 30.0
    keyword_cap: int = 10
    formatting_points: float = 15.0
    min_text_length: int = 100
    skills_points: float = 15.0
    skills_fallback_points: float = 5.0
    email_points: float = 10.0
    phone_points: float = 5.0
    profile_points: float = 5.0
    min_word_count: int = 500
    strong_sections: int = 3
    strong_keywords: int = 5

    def __post_init__(self) -> None:
        if self.keyword_cap < 1:
            raise ValueError("keyword_cap must be at least 1")
        if self.min_text_length < 0:
            raise ValueError("min_text_length must not be negative")
        if not 0 <= self.strong_sections <= 5:
            raise ValueError("strong_sections must be between 0 and 5")
        for name in (
            "section_points",
            "keyword_points",
            "formatting_points",
            "skills_points",
            "skills_fallback_points",
            "email_points",
            "phone_points",
            "profile_points",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        total = (
            self.section_points
            + self.keyword_points
            + self.formatting_points
            + self.skills_points
            + self.email_points
            + self.phone_points
            + self.profile_points
        )
        if total > 100:
            raise ValueError(f"ATS weights add up to {total}, above the 100 point scale")


@dataclass(frozen=True)
class ExportConfig:
    default_template: str = "modern"
    default_locale: str = "en"


@dataclass(frozen=True)
class FeatureConfig:
    show_ads: bool = False


@dataclass(frozen=True)
class AppConfig:
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    ats: AtsConfig = field(default_factory=AtsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    features: FeatureConfig = field(default_factory=FeatureConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [Path.cwd() / "config.yaml"]
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            candidates.insert(0, Path(env_path).expanduser())
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        layout=LayoutConfig(**raw.get("layout", {})),
        ats=AtsConfig(**raw.get("ats", {})),
        export=ExportConfig(**raw.get("export", {})),
        features=FeatureConfig(**raw.get("features", {})),
    )
