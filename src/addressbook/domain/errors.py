"""Domain errors. Raised by value objects and the person collection."""


class InvalidFormatError(ValueError):
    """A raw field value failed its format check. Raised only at construction."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidDisplayedIndexError(IndexError):
    """The displayed index is outside the currently displayed list."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Displayed index {index} is out of range.")
        self.index = index


class AddressBookError(Exception):
    """Base for collection errors."""


class DuplicatePersonError(AddressBookError):
    """Adding the person would create a duplicate in the collection."""


class PersonNotFoundError(AddressBookError):
    """The person is not in the collection."""
