"""Garde "dernière sélection gagnante" pour les recherches asynchrones.

Quand un même sujet (membre) change de sélection pendant qu'une recherche est en cours
(changement rapide de pays), seule la réponse de la sélection la plus récente doit être
appliquée: les réponses arrivées en retard pour une sélection abandonnée sont écartées.
Deux recherches concurrentes pour une sélection inchangée partagent le même jeton et restent
toutes deux valides.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Hashable


class LatestRequestGate:
    """Distribue des jetons croissants par sujet et valide la fraîcheur des réponses."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest: dict[str, tuple[int, Hashable]] = {}
        self._lock = threading.Lock()

    def issue(self, key: str, selection: Hashable = None) -> int:
        """Jeton pour la sélection `selection` de `key`.

        Une nouvelle sélection rend périmés les jetons précédents; répéter la sélection
        courante renvoie le jeton courant.
        """
        with self._lock:
            current = self._latest.get(key)
            if current is not None and current[1] == selection:
                return current[0]
            token = next(self._counter)
            self._latest[key] = (token, selection)
            return token

    def is_current(self, key: str, token: int) -> bool:
        """Indique si `token` est toujours celui de la dernière sélection de `key`."""
        with self._lock:
            current = self._latest.get(key)
            return current is not None and current[0] == token
