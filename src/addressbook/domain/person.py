"""The Person record: validated fields plus a set of tags."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from addressbook.domain.fields import Address, Email, Name, Phone, Tag


@dataclass(frozen=True)
class Person:
    """
    Represents one entry in the address book.
    A Person is immutable once created; an update produces a new Person.
    Two persons are equal when every field, privacy flag and tag matches.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def from_raw(
        cls,
        name: str,
        phone: str,
        is_phone_private: bool,
        email: str,
        is_email_private: bool,
        address: str,
        is_address_private: bool,
        tags: Iterable[str] = (),
    ) -> "Person":
        """Build a Person from raw strings. Raises InvalidFormatError on the first bad field."""
        return cls(
            name=Name(name),
            phone=Phone(phone, is_phone_private),
            email=Email(email, is_email_private),
            address=Address(address, is_address_private),
            tags=frozenset(Tag(t) for t in tags),
        )

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags)

    def as_text_show_all(self) -> str:
        """All fields, with private ones marked."""
        parts = [self.name.full_name]
        for label, value in (
            ("Phone", self.phone),
            ("Email", self.email),
            ("Address", self.address),
        ):
            prefix = " (private) " if value.is_private else " "
            parts.append(f"{prefix}{label}: {value.value}")
        parts.append(" Tags: " + "".join(str(t) for t in self.sorted_tags()))
        return "".join(parts)

    def as_text_hide_private(self) -> str:
        """Only fields that are not private."""
        parts = [self.name.full_name]
        for label, value in (
            ("Phone", self.phone),
            ("Email", self.email),
            ("Address", self.address),
        ):
            if not value.is_private:
                parts.append(f" {label}: {value.value}")
        parts.append(" Tags: " + "".join(str(t) for t in self.sorted_tags()))
        return "".join(parts)

    def __str__(self) -> str:
        return self.as_text_show_all()
