import uuid
from datetime import date
from typing import Any

import structlog

from sharedtime.domain.calculator import compute_visualization
from sharedtime.domain.clock import Clock
from sharedtime.domain.entities import (
    CustomParams,
    FamilyMember,
    LifeExpectancyFigure,
    LifeExpectancyParams,
    VisualizationParams,
    VisualizationResult,
)
from sharedtime.domain.errors import MemberNotFoundError
from sharedtime.domain.feature_state import FeatureState, configure, disable, enable, feature_state
from sharedtime.domain.milestones import TimeUnit, member_stats, milestone_presets
from sharedtime.domain.target_date import DEFAULT_CUSTOM_YEARS

log = structlog.get_logger(__name__)

MAX_STALE_RETRIES = 3


class SharedTimeService:
    """Service métier pour la visualisation du temps partagé avec un membre.

    Responsabilités:
    - Charger/persister les membres via `members` (en mémoire ou Redis).
    - Résoudre l'espérance de vie via `resolver` (fournisseur + repli silencieux).
    - Appliquer la machine d'états UNSET / DISABLED / ENABLED.
    - Calculer le résultat affichable avec la date fournie par `clock`.
    """

    def __init__(
        self,
        members,
        resolver,
        clock: Clock,
        default_custom_years: float = DEFAULT_CUSTOM_YEARS,
    ):
        """Initialise le service avec ses dépendances.

        Paramètres:
        - members: dépôt de membres (`get`/`save` sur des dicts sérialisables).
        - resolver: `LifeExpectancyResolver`.
        - clock: source de la date du jour.
        - default_custom_years: durée du mode libre quand aucune n'est fournie.
        """
        self.members = members
        self.resolver = resolver
        self.clock = clock
        self.default_custom_years = default_custom_years

    # -- membres -----------------------------------------------------------

    def create_member(self, data: dict[str, Any]) -> FamilyMember:
        """Valide et enregistre un nouveau membre (identifiant généré si absent)."""
        member = FamilyMember(**{"id": str(uuid.uuid4()), **data})
        self._save(member)
        return member

    def get_member(self, member_id: str) -> FamilyMember:
        """Charge un membre; `MemberNotFoundError` s'il est absent."""
        record = self.members.get(member_id)
        if not record:
            raise MemberNotFoundError(member_id)
        return FamilyMember(**record)

    def _save(self, member: FamilyMember) -> FamilyMember:
        self.members.save(member.model_dump(mode="json"))
        return member

    def stats(self, member_id: str, unit: TimeUnit = "years") -> dict[str, Any]:
        """Âge et durée de la relation à la date du jour."""
        return member_stats(self.get_member(member_id), self.clock.today(), unit)

    def presets(self, member_id: str):
        """Jalons prédéfinis (18, 22, 65 ans) pour le membre."""
        return milestone_presets(self.get_member(member_id).birth_date)

    # -- espérance de vie -------------------------------------------------

    async def life_expectancy(self, country: str) -> LifeExpectancyFigure:
        """Chiffres d'un pays (fournisseur, sinon table de repli)."""
        return await self.resolver.resolve(country)

    async def _figure_for(self, member: FamilyMember, params: VisualizationParams):
        if not isinstance(params, LifeExpectancyParams):
            return None
        return await self.resolver.resolve_latest(member.id, params.country)

    # -- calcul -------------------------------------------------------------

    def _compute(self, member, params, today: date, figure) -> VisualizationResult:
        return compute_visualization(
            member,
            params,
            today,
            self.resolver.table,
            figure=figure,
            default_custom_years=self.default_custom_years,
        )

    async def preview(
        self, member: FamilyMember, params: VisualizationParams, today: date | None = None
    ) -> VisualizationResult:
        """Calcul sans état à partir d'un membre et de paramètres fournis."""
        figure = None
        if isinstance(params, LifeExpectancyParams):
            figure = await self.resolver.resolve(params.country)
        return self._compute(member, params, today or self.clock.today(), figure)

    async def time_together(self, member_id: str) -> dict[str, Any]:
        """État de la fonctionnalité et, si active, le résultat calculé.

        Une réponse d'espérance de vie devenue périmée (réglages modifiés pendant la recherche)
        est écartée et le calcul reprend sur les réglages les plus récents.
        """
        member = self.get_member(member_id)
        for _attempt in range(MAX_STALE_RETRIES):
            state = feature_state(member)
            if state is not FeatureState.ENABLED:
                return self._payload(member, state, None)
            params = member.time_visualization.params
            figure = await self._figure_for(member, params)
            if figure is not None or not isinstance(params, LifeExpectancyParams):
                break
            member = self.get_member(member_id)
        else:
            # Recherches toujours supplantées: la table de repli fait foi.
            figure = None
            state = feature_state(member)
            if state is not FeatureState.ENABLED:
                return self._payload(member, state, None)
        params = member.time_visualization.params
        result = self._compute(member, params, self.clock.today(), figure)
        return self._payload(member, FeatureState.ENABLED, result)

    @staticmethod
    def _payload(member: FamilyMember, state: FeatureState, result) -> dict[str, Any]:
        return {
            "member_id": member.id,
            "state": state.value,
            "settings": member.time_visualization,
            "result": result,
        }

    # -- transitions ----------------------------------------------------------

    async def configure(self, member_id: str, params: VisualizationParams) -> dict[str, Any]:
        """Première configuration ou édition; la fonctionnalité est ensuite active."""
        member = self.get_member(member_id)
        if isinstance(params, CustomParams):
            # Date de départ figée au moment de l'enregistrement
            params = params.model_copy(
                update={
                    "start_date": params.start_date or self.clock.today(),
                    "years": params.years or self.default_custom_years,
                }
            )
        previous = feature_state(member)
        member = self._save(configure(member, params))
        log.info(
            "time_together_configured",
            member_id=member_id,
            mode=params.mode,
            previous_state=previous.value,
        )
        return await self.time_together(member_id)

    def disable(self, member_id: str) -> dict[str, Any]:
        """Désactive la fonctionnalité (paramètres conservés)."""
        member = self._save(disable(self.get_member(member_id)))
        log.info("time_together_disabled", member_id=member_id)
        return self._payload(member, FeatureState.DISABLED, None)

    async def enable(self, member_id: str) -> dict[str, Any]:
        """Réactive la fonctionnalité avec les paramètres précédents."""
        self._save(enable(self.get_member(member_id)))
        log.info("time_together_enabled", member_id=member_id)
        return await self.time_together(member_id)
