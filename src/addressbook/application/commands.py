"""Commands executed against an address book and the currently displayed persons."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from addressbook.application.messages import (
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_IN_ADDRESSBOOK,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
)
from addressbook.domain import (
    AddressBook,
    DuplicatePersonError,
    InvalidDisplayedIndexError,
    Person,
    PersonNotFoundError,
)

# User-facing indices start at 1.
DISPLAYED_INDEX_OFFSET = 1

_PERSON_ARGS_USAGE = "NAME [p]p/PHONE [p]e/EMAIL [p]a/ADDRESS  [t/TAG]..."


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user, plus the persons to display when the command lists any."""

    feedback_to_user: str
    relevant_persons: tuple[Person, ...] | None = None


class Command:
    """Base command. Call set_data before execute."""

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""
    mutates_data = False

    def __init__(self, target_index: int | None = None) -> None:
        self.target_index = target_index
        self.address_book: AddressBook | None = None
        self.displayed_persons: tuple[Person, ...] = ()

    def set_data(self, address_book: AddressBook, displayed_persons: Sequence[Person]) -> None:
        self.address_book = address_book
        self.displayed_persons = tuple(displayed_persons)

    def get_target_person(self) -> Person:
        """Resolve target_index against the displayed persons snapshot."""
        index = self.target_index
        if index is None or not 1 <= index <= len(self.displayed_persons):
            raise InvalidDisplayedIndexError(index)
        return self.displayed_persons[index - DISPLAYED_INDEX_OFFSET]

    def execute(self) -> CommandResult:
        raise NotImplementedError


class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Contact details can be marked private by prepending 'p' to the prefix.\n"
        f"Parameters: {_PERSON_ARGS_USAGE}\n"
        f"Example: {COMMAND_WORD} John Doe p/98765432 e/johnd@gmail.com a/311, Clementi Ave 2, #02-25 t/friends"
    )
    MESSAGE_SUCCESS = "New person added: {}"
    mutates_data = True

    def __init__(self, person: Person) -> None:
        super().__init__()
        self._person = person

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
    ) -> "AddCommand":
        return cls(
            Person.from_raw(
                name, phone, is_phone_private, email, is_email_private,
                address, is_address_private, tags,
            )
        )

    @property
    def person(self) -> Person:
        return self._person

    def execute(self) -> CommandResult:
        try:
            self.address_book.add_person(self._person)
        except DuplicatePersonError:
            return CommandResult(MESSAGE_DUPLICATE_PERSON)
        return CommandResult(self.MESSAGE_SUCCESS.format(self._person))


class UpdateCommand(Command):
    """Replace the person at a displayed index with new details."""

    COMMAND_WORD = "update"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Replaces the details of the person identified by the index number "
        "used in the last person listing.\n"
        f"Parameters: INDEX {_PERSON_ARGS_USAGE}\n"
        f"Example: {COMMAND_WORD} 1 John Doe p/98765432 e/johnd@gmail.com a/311, Clementi Ave 2, #02-25"
    )
    MESSAGE_SUCCESS = "Updated Person: {}"
    mutates_data = True

    def __init__(self, target_index: int, person: Person) -> None:
        super().__init__(target_index)
        self._person = person

    @classmethod
    def from_raw(
        cls,
        target_index: int,
        name: str,
        phone: str,
        is_phone_private: bool,
        email: str,
        is_email_private: bool,
        address: str,
        is_address_private: bool,
        tags: Iterable[str] = (),
    ) -> "UpdateCommand":
        """Validate every field first. Raises InvalidFormatError; no command is built on failure."""
        person = Person.from_raw(
            name, phone, is_phone_private, email, is_email_private,
            address, is_address_private, tags,
        )
        return cls(target_index, person)

    @property
    def person(self) -> Person:
        return self._person

    def execute(self) -> CommandResult:
        try:
            target = self.get_target_person()
            self.address_book.replace_person(target, self._person)
        except InvalidDisplayedIndexError:
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        except PersonNotFoundError:
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        except DuplicatePersonError:
            return CommandResult(MESSAGE_DUPLICATE_PERSON)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number used in the last person listing.\n"
        "Parameters: INDEX\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"
    mutates_data = True

    def execute(self) -> CommandResult:
        try:
            target = self.get_target_person()
            self.address_book.remove_person(target)
        except InvalidDisplayedIndexError:
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        except PersonNotFoundError:
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Displays all persons in the address book as a list with index numbers.\n"
        f"Example: {COMMAND_WORD}"
    )

    def execute(self) -> CommandResult:
        persons = self.address_book.all_persons()
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(persons)), persons)


class FindCommand(Command):
    """Find persons with any name word equal to a keyword (case-insensitive)."""

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of the specified keywords "
        "and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    def __init__(self, keywords: Iterable[str]) -> None:
        super().__init__()
        self.keywords = frozenset(k.lower() for k in keywords)

    def execute(self) -> CommandResult:
        found = tuple(
            person
            for person in self.address_book.all_persons()
            if self.keywords.intersection(w.lower() for w in person.name.words())
        )
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(found)), found)


class ViewCommand(Command):
    COMMAND_WORD = "view"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the non-private details of the person identified by the index number "
        "in the last shown person listing.\n"
        "Parameters: INDEX\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_VIEW_PERSON_DETAILS = "Viewing person: {}"

    def _render(self, person: Person) -> str:
        return person.as_text_hide_private()

    def execute(self) -> CommandResult:
        try:
            target = self.get_target_person()
        except InvalidDisplayedIndexError:
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        if not self.address_book.contains_person(target):
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        return CommandResult(self.MESSAGE_VIEW_PERSON_DETAILS.format(self._render(target)))


class ViewAllCommand(ViewCommand):
    COMMAND_WORD = "viewall"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows all details of the person identified by the index number "
        "in the last shown person listing, private ones included.\n"
        "Parameters: INDEX\n"
        f"Example: {COMMAND_WORD} 1"
    )

    def _render(self, person: Person) -> str:
        return person.as_text_show_all()


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Clears address book permanently.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Address book has been cleared!"
    mutates_data = True

    def execute(self) -> CommandResult:
        self.address_book.clear()
        return CommandResult(self.MESSAGE_SUCCESS)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"

    def execute(self) -> CommandResult:
        return CommandResult(
            "\n".join(
                cmd.MESSAGE_USAGE
                for cmd in (
                    AddCommand,
                    DeleteCommand,
                    UpdateCommand,
                    ClearCommand,
                    FindCommand,
                    ListCommand,
                    ViewCommand,
                    ViewAllCommand,
                    HelpCommand,
                )
            )
        )


class IncorrectCommand(Command):
    """Carries the feedback for input that could not be turned into a command."""

    def __init__(self, feedback_to_user: str) -> None:
        super().__init__()
        self.feedback_to_user = feedback_to_user

    def execute(self) -> CommandResult:
        return CommandResult(self.feedback_to_user)
