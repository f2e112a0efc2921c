"""
Dépôts des profils de membres (avec leurs réglages de visualisation).

Le service traite ce stockage comme une paire opaque `get`/`save` sur des enregistrements
JSON (`FamilyMember.model_dump(mode="json")`); deux implémentations: en mémoire (dev/tests)
et Redis.
"""

import json
from typing import Any

import redis

MEMBER_KEY_PREFIX = "member:"


def member_key(member_id: str) -> str:
    """Clé de stockage d'un membre."""
    return f"{MEMBER_KEY_PREFIX}{member_id}"


def _require_member_id(record: dict[str, Any]) -> str:
    member_id = record.get("id")
    if not isinstance(member_id, str) or not member_id.strip():
        raise ValueError("member record requires a non-empty 'id'")
    return member_id


class InMemoryMemberRepo:
    """Membres indexés par clé de stockage dans un dict local, non persistant."""

    def __init__(self):
        self._records: dict[str, dict[str, Any]] = {}

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Enregistre/écrase un membre; ValueError si l'enregistrement n'a pas d'id."""
        self._records[member_key(_require_member_id(record))] = record
        return record

    def get(self, member_id: str) -> dict[str, Any] | None:
        return self._records.get(member_key(member_id))


class RedisMemberRepo:
    """Membres sérialisés en JSON sous `member:{id}`."""

    def __init__(self, url: str):
        """Crée le client à partir de l'URL; `ping` échoue tout de suite si Redis est absent."""
        self.client = redis.Redis.from_url(url, decode_responses=True)
        self.client.ping()

    def save(self, record: dict[str, Any]) -> dict[str, Any]:
        """Enregistre/écrase un membre; ValueError si l'enregistrement n'a pas d'id."""
        key = member_key(_require_member_id(record))
        self.client.set(key, json.dumps(record, ensure_ascii=False))
        return record

    def get(self, member_id: str) -> dict[str, Any] | None:
        raw = self.client.get(member_key(member_id))
        return json.loads(raw) if raw else None
