"""Configuration de test pour pytest.

Ajoute la racine du projet au sys.path et réinitialise le conteneur global avec des
collaborateurs en mémoire (stockage, fournisseur statique) et une horloge figée.
"""

import os
import sys
from datetime import date

import pytest

# Ensure project root is on sys.path so that
# imports like `from sharedtime...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sharedtime.core.container import DEFAULT_TABLE_PATH, container  # noqa: E402
from sharedtime.core.settings import Settings  # noqa: E402
from sharedtime.domain.clock import FixedClock  # noqa: E402
from sharedtime.domain.life_expectancy import LifeExpectancyTable  # noqa: E402

TODAY = date(2023, 1, 1)


def make_settings(**overrides) -> Settings:
    """Settings isolés de l'environnement de la machine (pas de .env, pas de Redis)."""
    values = {
        "REDIS_URL": None,
        "REQUIRE_REDIS": False,
        "LIFE_EXPECTANCY_PROVIDER": "static",
        "LIFE_EXPECTANCY_TABLE_PATH": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def table() -> LifeExpectancyTable:
    """Table de repli embarquée."""
    return LifeExpectancyTable.from_json(DEFAULT_TABLE_PATH)


@pytest.fixture(autouse=True)
def reset_container():
    """Reconstruit le conteneur global en mémoire avec une horloge figée au 2023-01-01."""
    container.__init__(settings=make_settings(), clock=FixedClock(TODAY))
    yield container
