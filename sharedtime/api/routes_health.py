"""
Endpoint de santé pour vérifier la disponibilité de l'API et du stockage.

Expose `/health` pour signaler l'état général de l'application, du stockage des membres et du
fournisseur d'espérance de vie configuré.
"""

from fastapi import APIRouter

from sharedtime.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et le backend de stockage."""
    return {
        "status": "ok",
        "storage": getattr(container, "storage_backend", "unknown"),
        "life_expectancy_provider": container.resolver.provider.name,
    }
