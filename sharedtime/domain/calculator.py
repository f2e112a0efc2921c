"""Pipeline complet du calculateur de temps partagé.

Résolution des dates → sélection de la date cible → projection de l'avancement. Fonction pure:
toutes les entrées (dont "aujourd'hui" et le chiffre d'espérance de vie) sont passées en
paramètres, chaque appel renvoie un résultat neuf.
"""

from __future__ import annotations

from datetime import date

from sharedtime.domain.entities import (
    FamilyMember,
    LifeExpectancyFigure,
    VisualizationParams,
    VisualizationResult,
)
from sharedtime.domain.life_expectancy import LifeExpectancyTable
from sharedtime.domain.progress import project_progress
from sharedtime.domain.target_date import DEFAULT_CUSTOM_YEARS, SelectionContext, select_target


def compute_visualization(
    member: FamilyMember,
    params: VisualizationParams,
    today: date,
    table: LifeExpectancyTable,
    figure: LifeExpectancyFigure | None = None,
    default_custom_years: float = DEFAULT_CUSTOM_YEARS,
) -> VisualizationResult:
    """Calcule le résultat affichable pour un membre et des paramètres donnés.

    Args:
        member: Membre (date de naissance et début de la relation).
        params: Paramètres du mode de visualisation.
        today: Date du jour fournie par l'horloge injectée.
        table: Table de repli des espérances de vie.
        figure: Chiffre déjà résolu pour le pays (None → table de repli).
        default_custom_years: Durée utilisée en mode libre sans nombre d'années.

    Returns:
        VisualizationResult: Date de fin, libellé, décomptes et avancement borné.
    """
    target = select_target(
        params,
        SelectionContext(
            birth_date=member.birth_date,
            today=today,
            table=table,
            figure=figure,
            default_custom_years=default_custom_years,
        ),
    )
    progress = project_progress(member.together_since, target.end_date, today)
    return VisualizationResult(
        end_date=target.end_date,
        label=target.label,
        days_remaining=progress.days_remaining,
        years_remaining=progress.years_remaining,
        progress_percent=progress.progress_percent,
        is_past=progress.is_past,
        data_source=target.data_source,
    )
