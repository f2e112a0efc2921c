"""
Entités du domaine "temps partagé".

Ce module définit les modèles de données manipulés par le calculateur: membre de la famille,
paramètres de visualisation (union discriminée par mode), chiffres d'espérance de vie et
résultat prêt à afficher.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from sharedtime.domain.dates import parse_calendar_date

VisualizationMode = Literal["life-expectancy", "milestone", "custom"]
Gender = Literal["male", "female"]
RelationshipType = Literal["parent", "child", "sibling", "grandparent", "spouse", "other"]


def _coerce_calendar_date(value):
    if isinstance(value, str | date):
        return parse_calendar_date(value)
    return value


# Dates lues composante par composante: "2024-03-01" reste le 1er mars sur tout hôte.
CalendarDate = Annotated[date, BeforeValidator(_coerce_calendar_date)]


class LifeExpectancyParams(BaseModel):
    """Projection jusqu'à l'espérance de vie estimée (pays + axe de recherche binaire)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["life-expectancy"] = "life-expectancy"
    country: str = "United States"
    gender: Gender = "male"


class MilestoneParams(BaseModel):
    """Projection jusqu'à une date cible choisie (diplôme, majorité, ...)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["milestone"] = "milestone"
    label: str = ""
    target_date: CalendarDate | None = None


class CustomParams(BaseModel):
    """Projection sur une durée libre en années à partir d'une date de départ."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Literal["custom"] = "custom"
    years: float | None = Field(default=None, gt=0)
    start_date: CalendarDate | None = None


VisualizationParams = Annotated[
    LifeExpectancyParams | MilestoneParams | CustomParams,
    Field(discriminator="mode"),
]


class VisualizationSettings(BaseModel):
    """Réglages persistés de la visualisation pour un membre.

    `enabled` peut repasser à False sans perdre `params`: réactiver restaure la configuration.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    has_confirmed_feature: bool = True
    params: VisualizationParams

    @property
    def mode(self) -> VisualizationMode:
        return self.params.mode


class FamilyMember(BaseModel):
    """Profil d'un membre de la famille tel que stocké par le backend."""

    id: str
    name: str
    relationship: RelationshipType = "other"
    birth_date: CalendarDate
    together_since: CalendarDate
    show_age: bool = True
    show_time_visualization: bool = False
    time_visualization: VisualizationSettings | None = None


class LifeExpectancyFigure(BaseModel):
    """Espérance de vie (en années) pour un pays, avec la provenance de la donnée."""

    model_config = ConfigDict(frozen=True)

    male_years: float = Field(gt=0)
    female_years: float = Field(gt=0)
    source: str = "static"

    def years_for(self, gender: Gender) -> float:
        """Retourne la valeur correspondant à l'axe demandé."""
        return self.male_years if gender == "male" else self.female_years


class VisualizationResult(BaseModel):
    """Résultat éphémère recalculé à chaque affichage (jamais persisté)."""

    end_date: date
    label: str
    days_remaining: int = Field(ge=0)
    years_remaining: int = Field(ge=0)
    progress_percent: float = Field(ge=0, le=100)
    is_past: bool
    data_source: str | None = None
