# Schémas Pydantic exposés par l'API (requêtes et réponses).

from datetime import date
from typing import Literal

from pydantic import BaseModel

from sharedtime.domain.entities import (
    CalendarDate,
    RelationshipType,
    VisualizationParams,
    VisualizationResult,
    VisualizationSettings,
)


class MemberRequest(BaseModel):
    """Requête de création d'un membre de la famille.

    Champs:
    - name: str
    - relationship: parent/child/sibling/grandparent/spouse/other
    - birth_date: str (YYYY-MM-DD)
    - together_since: str (YYYY-MM-DD, un horodatage ISO est ramené à son jour)
    - show_age: bool
    """

    name: str
    relationship: RelationshipType = "other"
    birth_date: CalendarDate
    together_since: CalendarDate
    show_age: bool = True


class MemberResponse(BaseModel):
    """Profil d'un membre tel que stocké."""

    id: str
    name: str
    relationship: RelationshipType
    birth_date: date
    together_since: date
    show_age: bool
    show_time_visualization: bool
    time_visualization: VisualizationSettings | None = None


class StatsResponse(BaseModel):
    """Compteurs du profil: âge (si affiché) et durée de la relation."""

    age: int | None
    time_together: int
    unit: Literal["years", "days"]
    birth_date: date
    together_since: date


class SettingsRequest(BaseModel):
    """Paramètres du mode choisi (union discriminée par `mode`)."""

    params: VisualizationParams


class TimeTogetherResponse(BaseModel):
    """État de la fonctionnalité et résultat calculé quand elle est active.

    Champs:
    - state: unset / disabled / enabled
    - settings: réglages stockés (conservés même désactivés)
    - result: `VisualizationResult` ou None hors état enabled
    """

    member_id: str
    state: Literal["unset", "disabled", "enabled"]
    settings: VisualizationSettings | None = None
    result: VisualizationResult | None = None


class PreviewRequest(BaseModel):
    """Calcul sans état: dates du membre, paramètres et date du jour optionnelle."""

    birth_date: CalendarDate
    together_since: CalendarDate
    params: VisualizationParams
    today: CalendarDate | None = None


class LifeExpectancyResponse(BaseModel):
    """Chiffres d'espérance de vie d'un pays et leur provenance."""

    country: str
    male_years: float
    female_years: float
    source: str
