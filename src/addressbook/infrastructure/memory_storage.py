"""In-memory implementation of AddressBookStorage (no DB)."""

from collections.abc import Iterable

from addressbook.domain import AddressBook, Person


class InMemoryAddressBookStorage:
    """Keeps a copy of the last saved snapshot, so later edits to the live book are not visible until saved."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._snapshot = AddressBook(persons)
        self.save_count = 0

    def load(self) -> AddressBook:
        return self._snapshot.copy()

    def save(self, address_book: AddressBook) -> None:
        self._snapshot = address_book.copy()
        self.save_count += 1
