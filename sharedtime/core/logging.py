"""Configuration de logging basée sur structlog.

Objectif du module
------------------
- Logs structurés lisibles en développement (console), JSON hors développement.
- Les événements applicatifs sont nommés en snake_case (`life_expectancy_fallback`, ...).
"""

import logging
import sys

import structlog


def setup_logging(debug: bool = True, json_logs: bool = False) -> None:
    """Configure structlog pour produire des logs détaillés et filtrables.

    Args:
        debug: Niveau DEBUG si vrai, INFO sinon.
        json_logs: Rendu JSON (production) au lieu du rendu console.
    """
    renderer = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
