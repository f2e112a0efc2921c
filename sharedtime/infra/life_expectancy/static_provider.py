"""Fournisseur déterministe adossé à la table statique.

Utilisé en développement et dans les tests: aucune dépendance réseau, résultats stables.
"""

from sharedtime.domain.entities import LifeExpectancyFigure
from sharedtime.domain.errors import LifeExpectancyProviderError
from sharedtime.domain.life_expectancy import LifeExpectancyTable
from sharedtime.infra.life_expectancy.base import LifeExpectancyProvider

STATIC_SOURCE = "static"


class StaticLifeExpectancyProvider(LifeExpectancyProvider):
    """Sert les lignes de la table; un pays absent est traité comme "aucune donnée"."""

    name = "static"

    def __init__(self, table: LifeExpectancyTable):
        self.table = table

    async def fetch(self, country: str) -> LifeExpectancyFigure:
        if country not in self.table:
            raise LifeExpectancyProviderError(f"no data for {country!r}")
        figure = self.table.figure_for(country)
        return figure.model_copy(update={"source": STATIC_SOURCE})
