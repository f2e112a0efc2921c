# ============================================================
# Module : sharedtime/infra/life_expectancy/http_provider.py
# Objet  : Client HTTP du service distant "get-life-expectancy".
# Contrat : POST {"country": str}
#           → {"success": bool, "male": number, "female": number, "source": str}
# Invariants :
#  - Toute réponse inexploitable lève LifeExpectancyProviderError.
#  - La clé d'API n'est jamais journalisée.
# ============================================================
"""Fournisseur d'espérance de vie via une fonction distante (httpx asynchrone)."""

from __future__ import annotations

import httpx
import structlog

from sharedtime.core.http_constants import DEFAULT_PROVIDER_TIMEOUT
from sharedtime.domain.entities import LifeExpectancyFigure
from sharedtime.domain.errors import LifeExpectancyProviderError
from sharedtime.infra.life_expectancy.base import LifeExpectancyProvider


def _is_number(value: object) -> bool:
    # bool est un int en Python: `true` n'est pas une espérance de vie
    return isinstance(value, int | float) and not isinstance(value, bool)


class HttpLifeExpectancyProvider(LifeExpectancyProvider):
    """Appelle le service distant et valide sa réponse.

    Le client peut être injecté (tests: `httpx.MockTransport`); sinon il est créé avec un
    délai d'attente borné.
    """

    name = "http"

    def __init__(
        self,
        url: str,
        api_key: str | None = None,
        timeout_s: float = DEFAULT_PROVIDER_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._log = structlog.get_logger(__name__).bind(component="life_expectancy_http")
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = client or httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(timeout_s),
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
        )

    async def fetch(self, country: str) -> LifeExpectancyFigure:
        """Interroge le service distant pour `country`.

        Raises:
            LifeExpectancyProviderError: Erreur réseau, statut HTTP en échec, délai dépassé,
                `success` faux ou chiffres absents.
        """
        try:
            resp = await self._client.post(self.url, json={"country": country})
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            raise LifeExpectancyProviderError(f"provider request failed: {exc}") from exc
        except ValueError as exc:
            raise LifeExpectancyProviderError("provider returned invalid JSON") from exc
        return self._parse(data)

    def _parse(self, data: object) -> LifeExpectancyFigure:
        if not isinstance(data, dict) or not data.get("success"):
            raise LifeExpectancyProviderError("provider returned no data")
        male, female = data.get("male"), data.get("female")
        if not (_is_number(male) and _is_number(female)):
            raise LifeExpectancyProviderError("provider response misses figures")
        if male <= 0 or female <= 0:
            raise LifeExpectancyProviderError("provider response has invalid figures")
        return LifeExpectancyFigure(
            male_years=float(male),
            female_years=float(female),
            source=str(data.get("source") or self.name),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
