"""Jalons prédéfinis et compteurs affichés sur le profil d'un membre."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from sharedtime.domain.dates import add_years, days_between, years_between
from sharedtime.domain.entities import FamilyMember, MilestoneParams

TimeUnit = Literal["years", "days"]

MILESTONE_PRESETS: list[dict[str, Any]] = [
    {"label": "Until they turn 18", "target_age": 18},
    {"label": "Until graduation (22)", "target_age": 22},
    {"label": "Until retirement (65)", "target_age": 65},
]


def milestone_presets(birth_date: date) -> list[MilestoneParams]:
    """Construit les jalons prédéfinis à partir de la date de naissance."""
    return [
        MilestoneParams(label=p["label"], target_date=add_years(birth_date, p["target_age"]))
        for p in MILESTONE_PRESETS
    ]


def member_stats(member: FamilyMember, today: date, unit: TimeUnit = "years") -> dict[str, Any]:
    """Âge et durée de la relation, en années révolues ou en jours.

    Retour: dict avec `age`, `time_together`, `unit`, `birth_date`, `together_since`.
    """
    if unit == "days":
        together = days_between(member.together_since, today)
    else:
        together = years_between(member.together_since, today)
    return {
        "age": years_between(member.birth_date, today) if member.show_age else None,
        "time_together": together,
        "unit": unit,
        "birth_date": member.birth_date,
        "together_since": member.together_since,
    }
