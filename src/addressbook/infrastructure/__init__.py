"""Infrastructure layer: concrete implementations of application ports, config, and phone formatting."""

from addressbook.infrastructure.config import Settings, load_env_file
from addressbook.infrastructure.memory_storage import InMemoryAddressBookStorage
from addressbook.infrastructure.persistence.neo4j_storage import (
    Neo4jAddressBookStorage,
    ensure_address_book_constraint,
)
from addressbook.infrastructure.phone import phone_e164

__all__ = [
    "InMemoryAddressBookStorage",
    "Neo4jAddressBookStorage",
    "Settings",
    "ensure_address_book_constraint",
    "load_env_file",
    "phone_e164",
]
