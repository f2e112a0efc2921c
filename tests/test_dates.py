"""Tests pour l'arithmétique de dates calendaires.

Ce module teste le calcul des écarts en jours et en années révolues, l'ajout d'années et la
lecture des dates "YYYY-MM-DD" indépendamment du fuseau horaire de l'hôte.
"""

from __future__ import annotations

import time
from datetime import date, datetime

import pytest

from sharedtime.domain.dates import (
    add_years,
    days_between,
    parse_calendar_date,
    round_half_up,
    years_between,
)
from sharedtime.domain.errors import InvalidDateError

# Constantes pour éviter les valeurs magiques
DAYS_2020_TO_2023 = 1096
DAYS_2020_TO_2028 = 2922
AGE_BEFORE_BIRTHDAY = 23
AGE_ON_BIRTHDAY = 24

SAMPLE_DATES = [
    date(1990, 1, 1),
    date(2000, 2, 29),
    date(2020, 1, 1),
    date(2023, 3, 26),
    date(2024, 10, 27),
    date(2078, 12, 31),
]


def test_days_between_counts_calendar_days() -> None:
    """Teste le décompte de jours sur plusieurs années bissextiles."""
    assert days_between(date(2020, 1, 1), date(2023, 1, 1)) == DAYS_2020_TO_2023
    assert days_between(date(2020, 1, 1), date(2028, 1, 1)) == DAYS_2020_TO_2028


def test_days_between_is_antisymmetric() -> None:
    """Teste que l'écart est positif dans l'ordre et opposé dans l'autre sens."""
    for a in SAMPLE_DATES:
        for b in SAMPLE_DATES:
            if a <= b:
                assert days_between(a, b) >= 0
            assert days_between(a, b) == -days_between(b, a)


def test_days_between_ignores_dst_changes() -> None:
    """Teste qu'un passage à l'heure d'été ne décale pas le décompte."""
    # Europe: 31 mars 2024 / États-Unis: 10 mars 2024
    assert days_between(date(2024, 3, 30), date(2024, 4, 1)) == 2
    assert days_between(date(2024, 3, 9), date(2024, 3, 11)) == 2


def test_years_between_same_date_is_zero() -> None:
    """Teste qu'aucune année n'est révolue entre une date et elle-même."""
    for d in SAMPLE_DATES:
        assert years_between(d, d) == 0


def test_years_between_birthday_boundary() -> None:
    """Teste la décrémentation la veille de l'anniversaire."""
    birth = date(2000, 6, 15)
    assert years_between(birth, date(2024, 6, 14)) == AGE_BEFORE_BIRTHDAY
    assert years_between(birth, date(2024, 6, 15)) == AGE_ON_BIRTHDAY


def test_years_between_leap_day_birthday() -> None:
    """Teste qu'une naissance un 29 février ne compte l'année qu'au 1er mars."""
    birth = date(2000, 2, 29)
    assert years_between(birth, date(2023, 2, 28)) == 22
    assert years_between(birth, date(2023, 3, 1)) == 23
    assert years_between(birth, date(2024, 2, 29)) == 24


def test_years_between_backwards_is_negative() -> None:
    """Teste qu'un écart inversé donne l'opposé du nombre d'années révolues."""
    assert years_between(date(2024, 1, 1), date(2020, 6, 1)) == -3
    assert years_between(date(2023, 2, 28), date(2000, 2, 29)) == -22


def test_add_years_whole_years() -> None:
    """Teste l'ajout d'un nombre entier d'années."""
    assert add_years(date(1990, 1, 1), 88) == date(2078, 1, 1)
    assert add_years(date(2023, 1, 1), 5) == date(2028, 1, 1)


def test_add_years_clamps_leap_day() -> None:
    """Teste que le 29 février est ramené au 28 février d'une année non bissextile."""
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
    assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)


def test_add_years_fractional_uses_whole_months() -> None:
    """Teste qu'une durée fractionnaire ajoute des mois entiers (fin de mois bornée)."""
    assert add_years(date(2021, 8, 31), 0.5) == date(2022, 2, 28)
    assert add_years(date(2020, 1, 15), 2.5) == date(2022, 7, 15)
    # 1.05 an = 12.6 mois → 12 mois
    assert add_years(date(2020, 1, 15), 1.05) == date(2021, 1, 15)


def test_round_half_up() -> None:
    """Teste l'arrondi des demis vers le haut."""
    assert round_half_up(81.5) == 82
    assert round_half_up(82.5) == 83
    assert round_half_up(72.4) == 72
    assert round_half_up(88) == 88


def test_parse_calendar_date_components() -> None:
    """Teste que les composantes de la chaîne sont reprises telles quelles."""
    d = parse_calendar_date("2024-03-01")
    assert (d.year, d.month, d.day) == (2024, 3, 1)


def test_parse_calendar_date_keeps_literal_day_of_timestamp() -> None:
    """Teste qu'un horodatage avec heure et décalage garde son jour littéral."""
    assert parse_calendar_date("2024-03-01T23:30:00-05:00") == date(2024, 3, 1)
    assert parse_calendar_date("2024-03-01 00:15:00+14:00") == date(2024, 3, 1)


def test_parse_calendar_date_accepts_date_objects() -> None:
    """Teste le passage direct d'objets date/datetime."""
    assert parse_calendar_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_calendar_date(datetime(2024, 3, 1, 23, 59)) == date(2024, 3, 1)


@pytest.mark.parametrize("raw", ["", "not a date", "2024/03/01", "2024-02-30", "2023-13-01"])
def test_parse_calendar_date_rejects_invalid(raw: str) -> None:
    """Teste le rejet des chaînes mal formées ou des jours inexistants."""
    with pytest.raises(InvalidDateError):
        parse_calendar_date(raw)


def test_invalid_date_error_is_value_error() -> None:
    """Teste que l'erreur reste attrapable comme ValueError (validation pydantic)."""
    with pytest.raises(ValueError):
        parse_calendar_date("nope")


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="time.tzset requis (POSIX)")
@pytest.mark.parametrize("tz", ["UTC", "America/Los_Angeles", "Pacific/Kiritimati", "Asia/Tokyo"])
def test_parse_calendar_date_independent_of_host_timezone(monkeypatch, tz: str) -> None:
    """Teste que le jour lu ne dépend pas du fuseau configuré sur l'hôte."""
    monkeypatch.setenv("TZ", tz)
    time.tzset()
    try:
        d = parse_calendar_date("2024-03-01")
        assert (d.year, d.month, d.day) == (2024, 3, 1)
    finally:
        monkeypatch.undo()
        time.tzset()
