"""Interface de base des fournisseurs d'espérance de vie."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sharedtime.domain.entities import LifeExpectancyFigure


class LifeExpectancyProvider(ABC):
    """Interface abstraite d'un fournisseur `pays → LifeExpectancyFigure`."""

    name: str = "provider"

    @abstractmethod
    async def fetch(self, country: str) -> LifeExpectancyFigure:
        """Retourne les chiffres du pays ou lève `LifeExpectancyProviderError`."""
        ...

    async def aclose(self) -> None:
        """Libère les ressources réseau éventuelles."""
        return None
