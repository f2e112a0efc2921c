"""
Application principale FastAPI.

Ce module assemble les composants de l'application : middlewares, gestionnaires d'erreurs,
routes et métriques du service de temps partagé.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (request id, timing, Prometheus)
- Monter les routers (santé, membres, calculs sans état, métriques)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from sharedtime.api.routes_health import router as health_router
from sharedtime.api.routes_members import router as members_router
from sharedtime.api.routes_time_together import router as time_together_router
from sharedtime.app.errors import register_error_handlers
from sharedtime.app.metrics import PrometheusMiddleware, metrics_router
from sharedtime.core.container import container
from sharedtime.core.logging import setup_logging
from sharedtime.middlewares.request_id import RequestIDMiddleware
from sharedtime.middlewares.timing import TimingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Fermeture du client HTTP du fournisseur d'espérance de vie
    await container.resolver.provider.aclose()


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes et les gestionnaires d'erreurs
    """
    settings = container.settings
    setup_logging(debug=settings.APP_DEBUG, json_logs=settings.APP_ENV != "dev")
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG, lifespan=lifespan)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(members_router)
    app.include_router(time_together_router)
    app.include_router(metrics_router)
    return app


app = create_app()
