"""Value objects for the fields of a person. Each validates itself on construction."""

import re
from dataclasses import dataclass

from addressbook.domain.errors import InvalidFormatError

# Letters and digits only (unicode aware); "_" is a word character but not alphanumeric.
_ALNUM = r"[^\W_]"

NAME_PATTERN = re.compile(rf"{_ALNUM}+(?: +{_ALNUM}+)*")
PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_EMAIL_LOCAL = r"[A-Za-z0-9](?:[A-Za-z0-9._%+-]*[A-Za-z0-9])?"
_EMAIL_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
EMAIL_PATTERN = re.compile(rf"{_EMAIL_LOCAL}@{_EMAIL_LABEL}(?:\.{_EMAIL_LABEL})+")
TAG_PATTERN = re.compile(rf"{_ALNUM}+")


def _clean(value: str | None) -> str:
    return (value or "").strip()


@dataclass(frozen=True)
class Name:
    """A person's name: words of letters and digits separated by spaces."""

    full_name: str

    EXAMPLE = "John Doe"
    MESSAGE_CONSTRAINTS = "Person names should be spaces or alphanumeric characters"

    def __post_init__(self):
        name = _clean(self.full_name)
        if not NAME_PATTERN.fullmatch(name):
            raise InvalidFormatError("name", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "full_name", name)

    def words(self) -> list[str]:
        return self.full_name.split()

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    """A phone number of digits only, no separators or country-code prefix."""

    value: str
    is_private: bool = False

    EXAMPLE = "98765432"
    MESSAGE_CONSTRAINTS = "Person phone numbers should only contain numbers, and be at least 3 digits long"

    def __post_init__(self):
        number = _clean(self.value)
        if not PHONE_PATTERN.fullmatch(number):
            raise InvalidFormatError("phone", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", number)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str
    is_private: bool = False

    EXAMPLE = "johnd@gmail.com"
    MESSAGE_CONSTRAINTS = (
        "Person emails should be 2 alphanumeric/period strings separated by '@', "
        "with a domain that contains at least one '.'"
    )

    def __post_init__(self):
        email = _clean(self.value)
        if not EMAIL_PATTERN.fullmatch(email):
            raise InvalidFormatError("email", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", email)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str
    is_private: bool = False

    EXAMPLE = "311, Clementi Ave 2, #02-25"
    MESSAGE_CONSTRAINTS = "Person addresses can be in any format, but must not be blank"

    def __post_init__(self):
        address = _clean(self.value)
        if not address:
            raise InvalidFormatError("address", self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", address)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Tag:
    """A single-word alphanumeric label. Not trimmed: surrounding spaces are invalid."""

    name: str

    EXAMPLE = "friends"
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    def __post_init__(self):
        if not isinstance(self.name, str) or not TAG_PATTERN.fullmatch(self.name):
            raise InvalidFormatError("tag", self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"
