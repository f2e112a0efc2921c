"""
Projection de l'avancement dans une fenêtre de temps partagé.

À partir du début de la relation, de la date de fin et de la date du jour, calcule un ratio
borné à [0, 100] et des décomptes restants jamais négatifs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sharedtime.domain.dates import days_between, years_between

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0


@dataclass(frozen=True)
class Progress:
    """Avancement calculé (avant mise en forme du résultat)."""

    days_remaining: int
    years_remaining: int
    progress_percent: float
    is_past: bool


def clamp(value: float, low: float, high: float) -> float:
    """Borne `value` dans l'intervalle [low, high]."""
    return max(low, min(high, value))


def project_progress(relationship_start: date, end_date: date, today: date) -> Progress:
    """Calcule l'avancement de `today` entre `relationship_start` et `end_date`.

    Une fenêtre vide ou inversée (fin avant ou égale au début) donne 0 % plutôt qu'une
    division par zéro ou un ratio négatif.
    """
    total_span = days_between(relationship_start, end_date)
    elapsed = days_between(relationship_start, today)
    remaining = max(0, days_between(today, end_date))
    years_left = max(0, years_between(today, end_date))
    if total_span > 0:
        percent = clamp(elapsed / total_span * 100, PERCENT_MIN, PERCENT_MAX)
    else:
        percent = PERCENT_MIN
    return Progress(
        days_remaining=remaining,
        years_remaining=years_left,
        progress_percent=percent,
        is_past=remaining <= 0,
    )
