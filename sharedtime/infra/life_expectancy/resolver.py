"""Résolution des chiffres d'espérance de vie avec repli silencieux.

Objectif du module
------------------
- Interroger le fournisseur configuré; en cas d'échec (erreur, délai, absence de données),
  substituer la ligne de la table de repli sans jamais propager l'erreur à l'appelant.
- Écarter les réponses périmées quand plusieurs recherches se chevauchent pour un même sujet.
"""

from __future__ import annotations

import structlog

from sharedtime.app.metrics import LIFE_EXPECTANCY_LOOKUPS, LIFE_EXPECTANCY_STALE
from sharedtime.domain.entities import LifeExpectancyFigure
from sharedtime.domain.life_expectancy import LifeExpectancyTable
from sharedtime.domain.requests import LatestRequestGate
from sharedtime.infra.life_expectancy.base import LifeExpectancyProvider

log = structlog.get_logger(__name__)


class LifeExpectancyResolver:
    """Fournisseur + table de repli + garde de fraîcheur."""

    def __init__(
        self,
        provider: LifeExpectancyProvider,
        table: LifeExpectancyTable,
        gate: LatestRequestGate | None = None,
    ) -> None:
        self.provider = provider
        self.table = table
        self.gate = gate or LatestRequestGate()

    async def resolve(self, country: str) -> LifeExpectancyFigure:
        """Retourne les chiffres du pays; ne lève jamais.

        Args:
            country: Nom du pays (clé de la table de repli).

        Returns:
            LifeExpectancyFigure: Chiffres du fournisseur, ou de la table (`source="fallback"`).
        """
        try:
            figure = await self.provider.fetch(country)
        except Exception as err:  # repli local: l'échec du fournisseur n'est jamais remonté
            log.warning(
                "life_expectancy_fallback",
                country=country,
                provider=self.provider.name,
                reason=f"{type(err).__name__}: {err}",
            )
            LIFE_EXPECTANCY_LOOKUPS.labels("fallback").inc()
            return self.table.figure_for(country)
        LIFE_EXPECTANCY_LOOKUPS.labels("provider").inc()
        return figure

    async def resolve_latest(self, key: str, country: str) -> LifeExpectancyFigure | None:
        """Comme `resolve`, mais renvoie None si `key` a changé de pays entre-temps."""
        token = self.gate.issue(key, country)
        figure = await self.resolve(country)
        if not self.gate.is_current(key, token):
            log.info("life_expectancy_stale_response", key=key, country=country, token=token)
            LIFE_EXPECTANCY_STALE.inc()
            return None
        return figure
