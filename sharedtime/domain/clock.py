"""Sources de "date du jour" injectables."""

from __future__ import annotations

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Fournit la date calendaire courante."""

    def today(self) -> date: ...


class SystemClock:
    """Horloge système (date locale de l'hôte)."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Horloge figée, pour les tests et les prévisualisations datées."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
