"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, horloge, table de repli, fournisseur d'espérance
de vie, dépôt de membres, service) et expose un singleton `container` utilisé par le reste de
l'application.
"""

import os

import structlog

from sharedtime.core.settings import Settings, get_settings
from sharedtime.domain.clock import Clock, SystemClock
from sharedtime.domain.life_expectancy import LifeExpectancyTable
from sharedtime.domain.services import SharedTimeService
from sharedtime.infra.life_expectancy.base import LifeExpectancyProvider
from sharedtime.infra.life_expectancy.http_provider import HttpLifeExpectancyProvider
from sharedtime.infra.life_expectancy.resolver import LifeExpectancyResolver
from sharedtime.infra.life_expectancy.static_provider import StaticLifeExpectancyProvider
from sharedtime.infra.repositories import InMemoryMemberRepo, RedisMemberRepo

log = structlog.get_logger(__name__)

_INFRA_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), "..", "infra"))
DEFAULT_TABLE_PATH = os.path.join(_INFRA_DIR, "life_expectancy", "fallback_table.json")


def build_provider(settings: Settings, table: LifeExpectancyTable) -> LifeExpectancyProvider:
    """Choisit le fournisseur selon `LIFE_EXPECTANCY_PROVIDER`.

    Sans URL configurée, le mode `http` retombe sur le fournisseur statique.
    """
    if settings.LIFE_EXPECTANCY_PROVIDER == "http" and settings.LIFE_EXPECTANCY_URL:
        return HttpLifeExpectancyProvider(
            url=settings.LIFE_EXPECTANCY_URL,
            api_key=settings.LIFE_EXPECTANCY_API_KEY,
            timeout_s=settings.LIFE_EXPECTANCY_TIMEOUT_S,
        )
    if settings.LIFE_EXPECTANCY_PROVIDER == "http":
        log.warning("life_expectancy_url_missing", fallback="static")
    return StaticLifeExpectancyProvider(table)


class Container:
    def __init__(self, settings: Settings | None = None, clock: Clock | None = None):
        self.settings = settings or get_settings()
        self.clock = clock or SystemClock()
        self.table = LifeExpectancyTable.from_json(
            self.settings.LIFE_EXPECTANCY_TABLE_PATH or DEFAULT_TABLE_PATH
        )
        self.resolver = LifeExpectancyResolver(build_provider(self.settings, self.table), self.table)

        if self.settings.REDIS_URL:
            try:
                self.member_repo = RedisMemberRepo(self.settings.REDIS_URL)
                self.storage_backend = "redis"
            except Exception as err:
                if self.settings.REQUIRE_REDIS:
                    raise RuntimeError("Redis required but unavailable") from err
                log.warning("redis_unavailable", fallback="memory")
                self.member_repo = InMemoryMemberRepo()
                self.storage_backend = "memory-fallback"
        else:
            if self.settings.REQUIRE_REDIS:
                raise RuntimeError("Redis required but REDIS_URL not set")
            self.member_repo = InMemoryMemberRepo()
            self.storage_backend = "memory"

        self.service = SharedTimeService(
            members=self.member_repo,
            resolver=self.resolver,
            clock=self.clock,
            default_custom_years=self.settings.DEFAULT_CUSTOM_YEARS,
        )


container = Container()
