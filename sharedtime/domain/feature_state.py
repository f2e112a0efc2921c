"""
Machine d'états de la fonctionnalité "temps partagé" pour un membre.

États:
- UNSET: aucun réglage enregistré (invitation à activer).
- DISABLED: réglages présents mais `enabled=False`.
- ENABLED: réglages actifs, résultat calculé et affiché.

Transitions autorisées: UNSET → ENABLED (première configuration), ENABLED ↔ DISABLED
(bascule qui conserve les paramètres), ENABLED → ENABLED (édition). Il n'existe aucune
transition vers UNSET: désactiver ne supprime jamais la configuration.
"""

from __future__ import annotations

from enum import Enum

from sharedtime.domain.entities import FamilyMember, VisualizationParams, VisualizationSettings
from sharedtime.domain.errors import FeatureTransitionError


class FeatureState(str, Enum):
    """État de la fonctionnalité pour un membre."""

    UNSET = "unset"
    DISABLED = "disabled"
    ENABLED = "enabled"


def feature_state(member: FamilyMember) -> FeatureState:
    """Déduit l'état courant à partir des réglages stockés du membre."""
    settings = member.time_visualization
    if settings is None:
        return FeatureState.UNSET
    return FeatureState.ENABLED if settings.enabled else FeatureState.DISABLED


def configure(member: FamilyMember, params: VisualizationParams) -> FamilyMember:
    """Enregistre de nouveaux paramètres; la fonctionnalité est ensuite active."""
    settings = VisualizationSettings(enabled=True, has_confirmed_feature=True, params=params)
    return member.model_copy(
        update={"time_visualization": settings, "show_time_visualization": True}
    )


def disable(member: FamilyMember) -> FamilyMember:
    """Désactive la fonctionnalité en conservant les paramètres."""
    state = feature_state(member)
    if state is FeatureState.UNSET:
        raise FeatureTransitionError(state.value, "disable")
    settings = member.time_visualization.model_copy(update={"enabled": False})
    return member.model_copy(
        update={"time_visualization": settings, "show_time_visualization": False}
    )


def enable(member: FamilyMember) -> FamilyMember:
    """Réactive la fonctionnalité avec les paramètres précédemment enregistrés."""
    state = feature_state(member)
    if state is FeatureState.UNSET:
        raise FeatureTransitionError(state.value, "enable")
    settings = member.time_visualization.model_copy(update={"enabled": True})
    return member.model_copy(
        update={"time_visualization": settings, "show_time_visualization": True}
    )
