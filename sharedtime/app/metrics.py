"""
Métriques Prometheus du service de temps partagé.

- Trafic HTTP: nombre de requêtes et latence, étiquetés par gabarit de route.
- Espérance de vie: origine des chiffres servis (fournisseur ou table de repli) et réponses
  périmées écartées.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter(tags=["metrics"])

REQUEST_COUNT = Counter(
    "http_requests_total", "HTTP requests by route template", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency by route template", ["route"]
)

LIFE_EXPECTANCY_LOOKUPS = Counter(
    "life_expectancy_lookups_total",
    "Life expectancy lookups by origin of the returned figure",
    ["source"],
)
LIFE_EXPECTANCY_STALE = Counter(
    "life_expectancy_stale_responses_total",
    "Life expectancy responses discarded because a newer lookup was issued",
)


@metrics_router.get("/metrics")
def metrics():
    """Exposition texte pour le scraping Prometheus."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


def _route_template(request: Request) -> str:
    # /members/{member_id} plutôt que l'URL réelle: cardinalité bornée
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.scope.get("path", "unknown")


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Compte les requêtes et mesure leur durée."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response: Response = await call_next(request)
        route = _route_template(request)
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - started)
        return response
