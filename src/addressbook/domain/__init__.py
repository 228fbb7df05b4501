"""Domain layer: value objects, the Person record, and the address book. No dependencies on outer layers."""

from addressbook.domain.address_book import AddressBook, UniquePersonList
from addressbook.domain.errors import (
    AddressBookError,
    DuplicatePersonError,
    InvalidDisplayedIndexError,
    InvalidFormatError,
    PersonNotFoundError,
)
from addressbook.domain.fields import Address, Email, Name, Phone, Tag
from addressbook.domain.person import Person

__all__ = [
    "Address",
    "AddressBook",
    "AddressBookError",
    "DuplicatePersonError",
    "Email",
    "InvalidDisplayedIndexError",
    "InvalidFormatError",
    "Name",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "Tag",
    "UniquePersonList",
]
