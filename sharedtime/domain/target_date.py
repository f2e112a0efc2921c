"""
Sélection de la date cible d'une projection de temps partagé.

Chaque mode de visualisation est une stratégie pure indépendante; la sélection se fait par
dispatch sur le discriminant `mode` de l'union de paramètres. Le registre est vérifié à
l'import: un mode sans stratégie (ou une stratégie orpheline) est une erreur de programmation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import get_args

from sharedtime.domain.dates import add_years, round_half_up
from sharedtime.domain.entities import (
    CustomParams,
    LifeExpectancyFigure,
    LifeExpectancyParams,
    MilestoneParams,
    VisualizationMode,
    VisualizationParams,
)
from sharedtime.domain.life_expectancy import LifeExpectancyTable, gender_glyph

DEFAULT_CUSTOM_YEARS = 5
DEFAULT_MILESTONE_LABEL = "Until milestone"


@dataclass(frozen=True)
class SelectionContext:
    """Entrées externes communes aux stratégies."""

    birth_date: date
    today: date
    table: LifeExpectancyTable
    figure: LifeExpectancyFigure | None = None
    default_custom_years: float = DEFAULT_CUSTOM_YEARS


@dataclass(frozen=True)
class TargetDate:
    """Date de fin et libellé d'une projection."""

    end_date: date
    label: str
    data_source: str | None = None


def _format_years(years: float) -> str:
    return str(int(years)) if float(years).is_integer() else f"{years:g}"


def _life_expectancy_target(params: LifeExpectancyParams, ctx: SelectionContext) -> TargetDate:
    # Sans chiffre fourni (recherche en cours ou échouée), la table de repli fait foi.
    figure = ctx.figure or ctx.table.figure_for(params.country)
    years = round_half_up(figure.years_for(params.gender))
    return TargetDate(
        end_date=add_years(ctx.birth_date, years),
        label=f"Estimated shared time ({gender_glyph(params.gender)} {years} yrs)",
        data_source=figure.source,
    )


def _milestone_target(params: MilestoneParams, ctx: SelectionContext) -> TargetDate:
    return TargetDate(
        end_date=params.target_date or ctx.today,
        label=params.label.strip() or DEFAULT_MILESTONE_LABEL,
    )


def _custom_target(params: CustomParams, ctx: SelectionContext) -> TargetDate:
    years = params.years or ctx.default_custom_years
    start = params.start_date or ctx.today
    return TargetDate(
        end_date=add_years(start, years),
        label=f"Intentional time: {_format_years(years)} years",
    )


_STRATEGIES: dict[str, Callable[..., TargetDate]] = {
    "life-expectancy": _life_expectancy_target,
    "milestone": _milestone_target,
    "custom": _custom_target,
}

if set(_STRATEGIES) != set(get_args(VisualizationMode)):
    raise RuntimeError("target date strategies do not cover every visualization mode")


def select_target(params: VisualizationParams, ctx: SelectionContext) -> TargetDate:
    """Calcule `(date de fin, libellé)` pour les paramètres donnés.

    Args:
        params: Paramètres du mode actif (union discriminée).
        ctx: Date de naissance, date du jour, table de repli et chiffre éventuellement résolu.

    Returns:
        TargetDate: Date de fin, libellé et provenance de la donnée (mode espérance de vie).
    """
    return _STRATEGIES[params.mode](params, ctx)
