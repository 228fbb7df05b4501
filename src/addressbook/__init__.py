"""
Address book core: clean-architecture layout.

- domain: value objects (Name, Phone, Email, Address, Tag), Person, AddressBook. No outer dependencies.
- application: commands, parser, AddressBookService, ports (AddressBookStorage).
- infrastructure: adapters (InMemoryAddressBookStorage, Neo4jAddressBookStorage), settings.
"""

from addressbook.application import (
    AddressBookService,
    AddressBookStorage,
    CommandResult,
    StorageError,
    UpdateCommand,
    parse_command,
)
from addressbook.domain import AddressBook, InvalidFormatError, Person
from addressbook.infrastructure import InMemoryAddressBookStorage, Neo4jAddressBookStorage

__all__ = [
    "AddressBook",
    "AddressBookService",
    "AddressBookStorage",
    "CommandResult",
    "InMemoryAddressBookStorage",
    "InvalidFormatError",
    "Neo4jAddressBookStorage",
    "Person",
    "StorageError",
    "UpdateCommand",
    "parse_command",
]
