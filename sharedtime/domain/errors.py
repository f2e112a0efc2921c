"""Exceptions du domaine "temps partagé".

Les erreurs du fournisseur d'espérance de vie ne quittent jamais la couche de repli; les
autres sont traduites en réponses HTTP par l'API.
"""


class SharedTimeError(Exception):
    """Erreur de base du domaine."""


class MemberNotFoundError(SharedTimeError, KeyError):
    """Le membre de la famille demandé n'existe pas."""

    def __init__(self, member_id: str):
        super().__init__(member_id)
        self.member_id = member_id

    def __str__(self) -> str:
        return f"member_not_found: {self.member_id}"


class FeatureTransitionError(SharedTimeError):
    """Transition interdite dans la machine d'états de la fonctionnalité."""

    def __init__(self, current: str, action: str):
        super().__init__(f"cannot {action} from state {current}")
        self.current = current
        self.action = action


class LifeExpectancyProviderError(SharedTimeError):
    """Le fournisseur externe d'espérance de vie a échoué ou n'a rien renvoyé."""


class InvalidDateError(SharedTimeError, ValueError):
    """Date calendaire mal formée."""
