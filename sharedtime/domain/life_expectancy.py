"""Table de repli des espérances de vie et référentiel des pays sélectionnables.

La table est une donnée de configuration injectée (voir `core.container`): les tests peuvent
lui substituer une autre table sans toucher à un état global.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from sharedtime.domain.entities import Gender, LifeExpectancyFigure

DEFAULT_ROW = "Default"
FALLBACK_SOURCE = "fallback"

GENDER_GLYPHS: dict[str, str] = {"male": "♂", "female": "♀"}

COUNTRIES = [
    "United States", "Japan", "United Kingdom", "Germany", "France", "Canada",
    "Australia", "Spain", "Italy", "South Korea", "Brazil", "Mexico", "India", "China",
    "Russia", "Netherlands", "Sweden", "Switzerland", "Norway", "Denmark", "Finland",
    "Belgium", "Austria", "Portugal", "Greece", "Poland", "Czech Republic", "Hungary",
    "Ireland", "New Zealand", "Singapore", "Hong Kong", "Taiwan", "Thailand", "Indonesia",
    "Philippines", "Vietnam", "Malaysia", "Turkey", "Israel", "United Arab Emirates",
    "Saudi Arabia", "South Africa", "Nigeria", "Egypt", "Argentina", "Chile", "Colombia", "Peru",
]  # fmt: skip


def gender_glyph(gender: Gender) -> str:
    """Symbole affiché dans le libellé (♂ / ♀)."""
    return GENDER_GLYPHS.get(gender, GENDER_GLYPHS["male"])


class LifeExpectancyTable:
    """Table statique pays → (homme, femme) avec une ligne `Default` obligatoire."""

    def __init__(self, rows: Mapping[str, Mapping[str, float]], source: str = FALLBACK_SOURCE):
        """Initialise la table.

        Paramètres:
        - rows: mapping `{pays: {"male": années, "female": années}}`.
        - source: provenance reportée sur les chiffres renvoyés.
        """
        if DEFAULT_ROW not in rows:
            raise ValueError("life expectancy table requires a 'Default' row")
        self._rows = {
            country: (float(v["male"]), float(v["female"])) for country, v in rows.items()
        }
        self.source = source

    @classmethod
    def from_json(cls, path: str, source: str = FALLBACK_SOURCE) -> LifeExpectancyTable:
        """Charge une table depuis un fichier JSON `{pays: {male, female}}`."""
        with open(path, encoding="utf-8") as f:
            return cls(json.load(f), source=source)

    def __contains__(self, country: object) -> bool:
        return country in self._rows

    def figure_for(self, country: str | None) -> LifeExpectancyFigure:
        """Chiffres du pays demandé, ou de la ligne `Default` si le pays est inconnu."""
        male, female = self._rows.get(country or DEFAULT_ROW, self._rows[DEFAULT_ROW])
        return LifeExpectancyFigure(male_years=male, female_years=female, source=self.source)
