"""The authoritative person collection. Persons are addressed by equality, never by position."""

from collections.abc import Iterable, Iterator

from addressbook.domain.errors import DuplicatePersonError, PersonNotFoundError
from addressbook.domain.fields import Tag
from addressbook.domain.person import Person


class UniquePersonList:
    """Ordered list of persons in which no two persons are equal."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        for person in persons:
            self.add(person)

    def __contains__(self, person: object) -> bool:
        return person in self._persons

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._persons == other._persons

    def contains(self, person: Person) -> bool:
        return person in self._persons

    def add(self, person: Person) -> None:
        if person in self._persons:
            raise DuplicatePersonError(person)
        self._persons.append(person)

    def remove(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError(person) from None

    def replace(self, target: Person, new_person: Person) -> None:
        """Swap target for new_person in place. Either both checks pass or nothing changes."""
        try:
            position = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError(target) from None
        if new_person != target and new_person in self._persons:
            raise DuplicatePersonError(new_person)
        self._persons[position] = new_person

    def clear(self) -> None:
        self._persons.clear()

    def as_tuple(self) -> tuple[Person, ...]:
        return tuple(self._persons)


class AddressBook:
    """Persons plus the union of their tags."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons = UniquePersonList(persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons)"

    def __len__(self) -> int:
        return len(self._persons)

    @property
    def tags(self) -> frozenset[Tag]:
        return frozenset(tag for person in self._persons for tag in person.tags)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def replace_person(self, target: Person, new_person: Person) -> None:
        self._persons.replace(target, new_person)

    def contains_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def all_persons(self) -> tuple[Person, ...]:
        return self._persons.as_tuple()

    def clear(self) -> None:
        self._persons.clear()

    def copy(self) -> "AddressBook":
        return AddressBook(self._persons)
