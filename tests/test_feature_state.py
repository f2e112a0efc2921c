"""Tests pour la machine d'états UNSET / DISABLED / ENABLED."""

from __future__ import annotations

import pytest

from sharedtime.domain.entities import CustomParams, FamilyMember, MilestoneParams
from sharedtime.domain.errors import FeatureTransitionError
from sharedtime.domain.feature_state import (
    FeatureState,
    configure,
    disable,
    enable,
    feature_state,
)


@pytest.fixture
def member() -> FamilyMember:
    return FamilyMember(
        id="m1",
        name="Leo",
        relationship="child",
        birth_date="2015-04-02",
        together_since="2015-04-02",
    )


def test_new_member_is_unset(member) -> None:
    """Teste qu'un membre sans réglages est dans l'état UNSET."""
    assert feature_state(member) is FeatureState.UNSET
    assert member.show_time_visualization is False


def test_configure_enables_and_confirms(member) -> None:
    """Teste la première configuration: UNSET → ENABLED."""
    configured = configure(member, CustomParams(years=3))
    assert feature_state(configured) is FeatureState.ENABLED
    assert configured.time_visualization.has_confirmed_feature is True
    assert configured.show_time_visualization is True
    # Modèle d'origine inchangé
    assert feature_state(member) is FeatureState.UNSET


def test_disable_keeps_params_and_enable_restores_them(member) -> None:
    """Teste la bascule ENABLED ↔ DISABLED sans perte des paramètres."""
    params = MilestoneParams(label="Until graduation", target_date="2037-06-30")
    disabled = disable(configure(member, params))
    assert feature_state(disabled) is FeatureState.DISABLED
    assert disabled.time_visualization.params == params
    assert disabled.show_time_visualization is False

    restored = enable(disabled)
    assert feature_state(restored) is FeatureState.ENABLED
    assert restored.time_visualization.params == params
    assert restored.time_visualization.mode == "milestone"


def test_edit_while_enabled_replaces_params(member) -> None:
    """Teste l'édition ENABLED → ENABLED."""
    first = configure(member, CustomParams(years=3))
    edited = configure(first, MilestoneParams(label="Summer", target_date="2024-07-01"))
    assert feature_state(edited) is FeatureState.ENABLED
    assert edited.time_visualization.mode == "milestone"


def test_configure_from_disabled_enables(member) -> None:
    """Teste qu'enregistrer des paramètres réactive la fonctionnalité."""
    disabled = disable(configure(member, CustomParams(years=3)))
    assert feature_state(configure(disabled, CustomParams(years=4))) is FeatureState.ENABLED


@pytest.mark.parametrize(("action", "fn"), [("disable", disable), ("enable", enable)])
def test_toggle_from_unset_is_rejected(member, action: str, fn) -> None:
    """Teste qu'aucune bascule n'est possible avant la première configuration."""
    with pytest.raises(FeatureTransitionError) as excinfo:
        fn(member)
    assert excinfo.value.current == "unset"
    assert excinfo.value.action == action


def test_repeated_toggles_are_idempotent(member) -> None:
    """Teste que désactiver deux fois (ou réactiver deux fois) ne change rien de plus."""
    enabled = configure(member, CustomParams(years=3))
    assert feature_state(disable(disable(enabled))) is FeatureState.DISABLED
    assert feature_state(enable(enable(enabled))) is FeatureState.ENABLED
