"""
Script de serveur de développement.

Lance l'API avec le fournisseur d'espérance de vie statique par défaut, sans dépendance réseau.
"""

import os

# Ensure local-friendly defaults BEFORE importing app/modules
os.environ.setdefault("LIFE_EXPECTANCY_PROVIDER", "static")

import uvicorn

from sharedtime.app.main import app
from sharedtime.core.container import container


def main():
    """Point d'entrée: `python -m sharedtime.scripts.run_server` ou `sharedtime-server`."""
    settings = container.settings
    port = int(os.environ.get("PORT", settings.APP_PORT))
    uvicorn.run(app, host=settings.APP_HOST, port=port, reload=False)


if __name__ == "__main__":
    main()
