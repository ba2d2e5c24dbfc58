"""Signed serialization of musical entities.

Entities are stored as shareable "intents": a JSON payload signed with an
HMAC so a stored entity can be trusted when it is read back. Only the entity
kinds listed in ``ENTITY_TYPES`` are ever rebuilt from a payload.

Example:
    ```python
    signed = dump_entity(track, secret="s3cret")
    same_track = load_entity(signed.payload, signed.signature, secret="s3cret")
    ```
"""

from datetime import UTC, datetime, timedelta
import hashlib
import hmac
import json
from typing import Any

from attrs import define

from tunelink.config import get_logger, settings
from tunelink.domain.entities import AlbumEntity, MusicalEntity, TrackEntity
from tunelink.domain.interfaces import MusicalEntityInterface

logger = get_logger(__name__)

# Entity kinds that may be rebuilt from a payload
ENTITY_TYPES: dict[str, type[MusicalEntity]] = {
    AlbumEntity.TYPE: AlbumEntity,
    TrackEntity.TYPE: TrackEntity,
}

_RECORD_KEYS = ("type", "fields", "links", "introspected", "metadata")


class EntitySerializationError(ValueError):
    """A payload cannot be turned into an entity, or an entity into a payload."""


class TamperedEntityError(EntitySerializationError):
    """The payload signature does not match its content."""


@define(frozen=True, slots=True)
class SignedEntity:
    """Serialized entity together with its signature and expiry."""

    payload: str
    signature: str
    created_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(UTC)) >= self.expires_at


def entity_to_record(entity: MusicalEntityInterface) -> dict[str, Any]:
    """Plain record holding everything needed to rebuild an entity."""
    return {
        "type": entity.get_type(),
        "fields": entity.to_dict(),
        "links": list(entity.get_links()),
        "introspected": entity.is_introspected(),
        "metadata": entity.get_metadata(),
    }


def entity_from_record(record: dict[str, Any]) -> MusicalEntity:
    """Rebuild an entity from a record made by ``entity_to_record``."""
    missing = [key for key in _RECORD_KEYS if key not in record]
    if missing:
        raise EntitySerializationError(f"Entity record is missing keys: {missing}")

    entity_type = record["type"]
    entity_cls = None
    if isinstance(entity_type, str):
        entity_cls = ENTITY_TYPES.get(entity_type)
    if entity_cls is None:
        raise EntitySerializationError(f"Unsupported entity type: {entity_type!r}")

    links, metadata = record["links"], record["metadata"]
    if not isinstance(links, list) or not all(isinstance(link, str) for link in links):
        raise EntitySerializationError("Entity links must be a list of strings")
    if not isinstance(metadata, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in metadata.items()
    ):
        raise EntitySerializationError("Entity metadata must map strings to strings")
    if not isinstance(record["introspected"], bool):
        raise EntitySerializationError("Entity introspected flag must be a boolean")

    try:
        entity = entity_cls.from_dict(record["fields"])
    except (KeyError, TypeError) as e:
        raise EntitySerializationError(
            f"Invalid fields for {entity_type} entity: {e}",
        ) from e

    entity.add_links(links)
    if record["introspected"]:
        entity.set_introspected(metadata)
    return entity


def _require_secret(secret: str | None) -> str:
    secret = settings.intents.secret if secret is None else secret
    if not secret:
        raise EntitySerializationError("No signing secret configured")
    return secret


def sign_payload(payload: str, secret: str) -> str:
    """Hex HMAC-SHA256 of the payload."""
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def dump_entity(
    entity: MusicalEntityInterface,
    secret: str | None = None,
    lifetime: int | None = None,
    now: datetime | None = None,
) -> SignedEntity:
    """Serialize and sign an entity.

    Args:
        entity: Entity to serialize
        secret: Signing secret, defaults to ``settings.intents.secret``
        lifetime: Seconds before the intent expires, defaults to
            ``settings.intents.lifetime``; 0 means it never expires
        now: Creation time, defaults to the current UTC time

    Raises:
        EntitySerializationError: If the object is not an entity or no
            secret is configured
    """
    if not isinstance(entity, MusicalEntityInterface):
        raise EntitySerializationError(
            f"Cannot serialize {type(entity).__name__}: not a musical entity",
        )

    secret = _require_secret(secret)
    lifetime = settings.intents.lifetime if lifetime is None else lifetime
    created_at = now or datetime.now(UTC)

    payload = json.dumps(entity_to_record(entity), sort_keys=True)
    expires_at = created_at + timedelta(seconds=lifetime) if lifetime > 0 else None

    logger.debug(
        f"Signed {entity.get_type()} entity with {entity.count_links()} links",
    )
    return SignedEntity(
        payload=payload,
        signature=sign_payload(payload, secret),
        created_at=created_at,
        expires_at=expires_at,
    )


def load_entity(
    payload: str,
    signature: str,
    secret: str | None = None,
) -> MusicalEntity:
    """Verify a signed payload and rebuild its entity.

    Raises:
        TamperedEntityError: If the signature does not match the payload
        EntitySerializationError: If the payload is not a valid entity record
    """
    secret = _require_secret(secret)

    # Bytes, since compare_digest rejects non-ASCII str
    expected = sign_payload(payload, secret).encode("utf-8")
    if not hmac.compare_digest(expected, signature.encode("utf-8")):
        logger.warning("Rejected entity payload with an invalid signature")
        raise TamperedEntityError("Entity payload has been tampered with")

    try:
        record = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.warning(f"Signed entity payload is not valid JSON: {e}")
        raise EntitySerializationError("Entity payload is not valid JSON") from e

    if not isinstance(record, dict):
        raise EntitySerializationError("Entity payload is not a record")

    try:
        return entity_from_record(record)
    except EntitySerializationError as e:
        logger.warning(f"Could not rebuild entity: {e}")
        raise
