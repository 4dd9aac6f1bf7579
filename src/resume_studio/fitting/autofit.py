"""Auto-fit a rendered resume to exactly one A4 page.

Overflowing content is shrunk by a uniform font scale, never below the
configured floor. Short content is stretched by widening section and item
gaps, never past the configured cap. Both searches start from a closed-form
guess and continue by bisection on the measured height.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from resume_studio.config import LayoutConfig
from resume_studio.fitting.measure import Measurer, safe_measure
from resume_studio.locales import Locale
from resume_studio.models.resume import ResumeDocument
from resume_studio.rendering.engine import NEUTRAL_FIT, FitParameters, RenderedLayout, render

logger = logging.getLogger(__name__)

# Search intervals narrower than this are considered collapsed
_MIN_STEP = 1e-3


@dataclass(frozen=True)
class FitResult:
    layout: RenderedLayout
    measured_height: float | None
    target_height: float
    iterations: int
    converged: bool

    @property
    def fit(self) -> FitParameters:
        return self.layout.fit


class _Cancelled(Exception):
    pass


class AutoFitScaler:
    def __init__(self, measurer: Measurer, config: LayoutConfig | None = None):
        self.measurer = measurer
        self.config = config or LayoutConfig()

    def fit(
        self,
        document: ResumeDocument,
        locale: Locale | str = "en",
        is_current: Callable[[], bool] = lambda: True,
    ) -> FitResult | None:
        """Find fit parameters that place ``document`` on one page.

        Returns None when ``is_current`` reports the document changed while
        fitting; the partial result must not be applied.
        """
        cfg = self.config
        target = cfg.target_height_px
        upper = target * (1 + cfg.tolerance)
        lower = target * (1 - cfg.tolerance)
        iterations = 0
        cache: dict[FitParameters, tuple[RenderedLayout, float | None]] = {}

        def measure(fit: FitParameters) -> tuple[RenderedLayout, float | None]:
            nonlocal iterations
            if fit not in cache:
                layout = render(document, locale, fit)
                iterations += 1
                cache[fit] = (layout, safe_measure(self.measurer, layout))
                if not is_current():
                    raise _Cancelled
            return cache[fit]

        def done(fit: FitParameters, converged: bool) -> FitResult:
            layout, height = measure(fit)
            logger.info(
                "Auto-fit %s: scale=%.3f spacing=%.3f height=%s target=%.0f (%d measurements)",
                layout.template_id.value,
                fit.scale,
                fit.spacing,
                f"{height:.1f}" if height is not None else "n/a",
                target,
                iterations,
            )
            return FitResult(layout, height, target, iterations, converged)

        try:
            _, height = measure(NEUTRAL_FIT)
            if height is None:
                logger.warning("Content height unavailable, keeping neutral layout")
                return done(NEUTRAL_FIT, False)
            if lower <= height <= upper:
                return done(NEUTRAL_FIT, True)

            if height > upper:
                value, converged = self._search(
                    lambda v: measure(FitParameters(scale=v))[1],
                    lo=cfg.shrink_floor,
                    hi=1.0,
                    guess=max(cfg.shrink_floor, target / height),
                    best=None,
                    upper=upper,
                    lower=lower,
                    budget=lambda: cfg.max_iterations - iterations,
                )
                if value is None:
                    return done(NEUTRAL_FIT, False)
                if value <= cfg.shrink_floor and not converged:
                    logger.warning(
                        "Content overflows one page even at the %.2f scale floor",
                        cfg.shrink_floor,
                    )
                return done(FitParameters(scale=value), converged)

            value, converged = self._search(
                lambda v: measure(FitParameters(spacing=v))[1],
                lo=1.0,
                hi=cfg.spacing_cap,
                guess=min(cfg.spacing_cap, target / height),
                best=1.0,
                upper=upper,
                lower=lower,
                budget=lambda: cfg.max_iterations - iterations,
            )
            if value is None:
                return done(NEUTRAL_FIT, False)
            return done(FitParameters(spacing=value), converged)
        except _Cancelled:
            logger.debug("Auto-fit superseded by a newer document revision")
            return None

    @staticmethod
    def _search(
        height_at: Callable[[float], float | None],
        lo: float,
        hi: float,
        guess: float,
        best: float | None,
        upper: float,
        lower: float,
        budget: Callable[[], int],
    ) -> tuple[float | None, bool]:
        """Largest value in [lo, hi] whose height does not exceed ``upper``.

        Height must grow with the value. ``best`` is a value already known to
        fit, if any. Returns the value and whether its height landed inside
        the tolerance band; the value is None when measurement fails.
        """
        low, high = lo, hi
        value = guess
        while budget() > 0:
            height = height_at(value)
            if height is None:
                return None, False
            if height <= upper:
                best = value
                if height >= lower:
                    return value, True
                if value >= hi:
                    return value, False
                low = value
            else:
                if value <= lo:
                    return lo, False
                high = value
            if high - low < _MIN_STEP:
                break
            value = (low + high) / 2
        return (best if best is not None else lo), False


class FitSession:
    """Tracks document revisions and keeps only the newest fit.

    A fit computed for an older revision is discarded. Any edit puts the
    session back to neutral parameters until the next ``refit``.
    """

    def __init__(self, scaler: AutoFitScaler, locale: Locale | str = "en"):
        self.scaler = scaler
        self.locale = locale
        self.revision = 0
        self._document: ResumeDocument | None = None
        self._fingerprint: str | None = None
        self._result: FitResult | None = None

    @property
    def document(self) -> ResumeDocument | None:
        return self._document

    @property
    def result(self) -> FitResult | None:
        return self._result

    @property
    def fit(self) -> FitParameters:
        return self._result.fit if self._result else NEUTRAL_FIT

    def update(self, document: ResumeDocument, locale: Locale | str | None = None) -> bool:
        """Record a new document state; returns True when it changed."""
        fingerprint = document.fingerprint()
        locale_changed = locale is not None and locale != self.locale
        if fingerprint == self._fingerprint and not locale_changed:
            return False
        if locale is not None:
            self.locale = locale
        self._document = document
        self._fingerprint = fingerprint
        self._result = None
        self.revision += 1
        return True

    def refit(self) -> FitResult | None:
        """Fit the current document; returns None if superseded mid-fit."""
        if self._document is None:
            return None
        revision = self.revision
        result = self.scaler.fit(
            self._document,
            self.locale,
            is_current=lambda: self.revision == revision,
        )
        if result is None or revision != self.revision:
            return None
        self._result = result
        return result

    def layout(self) -> RenderedLayout | None:
        if self._result is None:
            self.refit()
        return self._result.layout if self._result else None
