"""Arithmétique de dates calendaires (âges, durées, projections).

Objectif du module
------------------
- Calculer des écarts en jours et en années révolues entre deux dates calendaires.
- Construire des dates à partir de composantes explicites (année, mois, jour) pour qu'une
  chaîne "YYYY-MM-DD" désigne toujours le même jour, quel que soit le fuseau de l'hôte.

Toutes les fonctions opèrent sur `datetime.date` (sans heure ni fuseau): un changement
d'heure été/hiver ne peut donc pas décaler un résultat.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from sharedtime.domain.errors import InvalidDateError

MONTHS_PER_YEAR = 12

# Préfixe ISO: un horodatage complet ("2024-03-01T23:30:00+02:00") garde son jour littéral.
_ISO_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T\s])")


def parse_calendar_date(value: str | date) -> date:
    """Convertit une valeur "YYYY-MM-DD" en date calendaire sans appliquer de fuseau.

    Args:
        value: Chaîne ISO (éventuellement suivie d'une heure, ignorée) ou date déjà construite.

    Returns:
        date: Date dont (année, mois, jour) sont exactement ceux de la chaîne.

    Raises:
        InvalidDateError: Si la chaîne n'a pas la forme attendue ou désigne un jour inexistant.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    match = _ISO_DATE_RE.match(str(value))
    if not match:
        raise InvalidDateError(f"invalid calendar date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as err:
        raise InvalidDateError(f"invalid calendar date: {value!r}") from err


def days_between(a: date, b: date) -> int:
    """Nombre de jours calendaires de `a` vers `b` (négatif si `b` précède `a`)."""
    return (b - a).days


def years_between(a: date, b: date) -> int:
    """Nombre d'années révolues de `a` vers `b`, en tenant compte de l'anniversaire.

    Exemple: du 2000-06-15 au 2024-06-14 → 23; au 2024-06-15 → 24.
    Un 29 février n'est fêté qu'à partir du 1er mars les années non bissextiles.
    """
    if b < a:
        return -years_between(b, a)
    return b.year - a.year - ((b.month, b.day) < (a.month, a.day))


def add_years(start: date, years: float) -> date:
    """Ajoute une durée en années à une date.

    Les durées fractionnaires sont converties en mois entiers (troncature vers zéro);
    un jour inexistant dans le mois d'arrivée est ramené au dernier jour du mois
    (29 février + 1 an → 28 février).
    """
    months = int(years * MONTHS_PER_YEAR)
    return start + relativedelta(months=months)


def round_half_up(value: float) -> int:
    """Arrondi à l'entier le plus proche, les demis vers le haut (81.5 → 82)."""
    return math.floor(value + 0.5)
