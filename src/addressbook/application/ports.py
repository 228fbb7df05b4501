"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import AddressBook


class StorageError(Exception):
    """Loading or saving the address book failed."""


class AddressBookStorage(Protocol):
    """Loads and saves whole address book snapshots."""

    def load(self) -> AddressBook:
        """Return the stored address book, or an empty one if nothing is stored. Raises StorageError."""
        ...

    def save(self, address_book: AddressBook) -> None:
        """Replace the stored snapshot with address_book. Raises StorageError."""
        ...
