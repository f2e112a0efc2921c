"""
Routes liées aux membres de la famille et à la visualisation du temps partagé.

Ce module regroupe les endpoints `/members` (création, lecture, compteurs du profil) et
`/members/{id}/time-together` (état, configuration, activation, jalons prédéfinis).
Les erreurs du domaine sont traduites par les gestionnaires d'exceptions de l'application.
"""

from typing import Literal

from fastapi import APIRouter, Query

from sharedtime.api.schemas import (
    MemberRequest,
    MemberResponse,
    SettingsRequest,
    StatsResponse,
    TimeTogetherResponse,
)
from sharedtime.core.container import container
from sharedtime.core.http_constants import HTTP_CREATED
from sharedtime.domain.entities import MilestoneParams

router = APIRouter(prefix="/members", tags=["members"])


@router.post("", response_model=MemberResponse, status_code=HTTP_CREATED)
def create_member(payload: MemberRequest):
    """Crée et enregistre un membre de la famille."""
    return container.service.create_member(payload.model_dump())


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(member_id: str):
    """Récupère un membre existant par identifiant, sinon 404."""
    return container.service.get_member(member_id)


@router.get("/{member_id}/stats", response_model=StatsResponse)
def get_stats(member_id: str, unit: Literal["years", "days"] = Query("years")):
    """Âge et durée de la relation, en années révolues (défaut) ou en jours."""
    return container.service.stats(member_id, unit)


@router.get("/{member_id}/time-together", response_model=TimeTogetherResponse)
async def get_time_together(member_id: str):
    """
    Retourne l'état de la fonctionnalité et le résultat calculé.

    Retour: `TimeTogetherResponse`; `result` est None hors état `enabled`.
    """
    return await container.service.time_together(member_id)


@router.put("/{member_id}/time-together/settings", response_model=TimeTogetherResponse)
async def put_settings(member_id: str, payload: SettingsRequest):
    """
    Enregistre les paramètres (première configuration ou édition) et active la fonctionnalité.

    Paramètres:
    - payload: `SettingsRequest` dont `params.mode` sélectionne le mode.
    """
    return await container.service.configure(member_id, payload.params)


@router.post("/{member_id}/time-together/disable", response_model=TimeTogetherResponse)
def disable_time_together(member_id: str):
    """Désactive la fonctionnalité sans perdre les paramètres (409 si jamais configurée)."""
    return container.service.disable(member_id)


@router.post("/{member_id}/time-together/enable", response_model=TimeTogetherResponse)
async def enable_time_together(member_id: str):
    """Réactive la fonctionnalité avec les paramètres précédents (409 si jamais configurée)."""
    return await container.service.enable(member_id)


@router.get("/{member_id}/time-together/presets", response_model=list[MilestoneParams])
def get_presets(member_id: str):
    """Jalons prédéfinis calculés depuis la date de naissance du membre."""
    return container.service.presets(member_id)
