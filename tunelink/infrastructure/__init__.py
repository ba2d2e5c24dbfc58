"""Infrastructure layer - adapters around the pure domain."""

from .serialization import (
    ENTITY_TYPES,
    EntitySerializationError,
    SignedEntity,
    TamperedEntityError,
    dump_entity,
    entity_from_record,
    entity_to_record,
    load_entity,
    sign_payload,
)

__all__ = [
    "ENTITY_TYPES",
    "EntitySerializationError",
    "SignedEntity",
    "TamperedEntityError",
    "dump_entity",
    "entity_from_record",
    "entity_to_record",
    "load_entity",
    "sign_payload",
]
