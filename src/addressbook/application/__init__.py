"""Application layer: commands, parser, session, and ports. Depends only on domain."""

from addressbook.application.address_book_service import AddressBookService
from addressbook.application.commands import (
    DISPLAYED_INDEX_OFFSET,
    AddCommand,
    ClearCommand,
    Command,
    CommandResult,
    DeleteCommand,
    FindCommand,
    HelpCommand,
    IncorrectCommand,
    ListCommand,
    UpdateCommand,
    ViewAllCommand,
    ViewCommand,
)
from addressbook.application.display import format_person_list, format_result
from addressbook.application.parser import parse_command
from addressbook.application.ports import AddressBookStorage, StorageError

__all__ = [
    "DISPLAYED_INDEX_OFFSET",
    "AddCommand",
    "AddressBookService",
    "AddressBookStorage",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "FindCommand",
    "HelpCommand",
    "IncorrectCommand",
    "ListCommand",
    "StorageError",
    "UpdateCommand",
    "ViewAllCommand",
    "ViewCommand",
    "format_person_list",
    "format_result",
    "parse_command",
]
