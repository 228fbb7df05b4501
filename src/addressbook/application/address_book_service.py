"""Runs user commands against one address book. One session per user."""

import logging

from addressbook.application.commands import CommandResult
from addressbook.application.messages import MESSAGE_STORAGE_FAILURE, MESSAGE_STORAGE_LOAD_FAILURE
from addressbook.application.parser import parse_command
from addressbook.application.ports import AddressBookStorage, StorageError
from addressbook.domain import AddressBook, Person

logger = logging.getLogger(__name__)


class AddressBookService:
    """Core loop step: load once -> parse -> bind book and displayed list -> execute -> save.

    The displayed list is the snapshot shown by the last list/find; indices in
    later commands refer to it even if the book has changed since.
    The book is loaded on first use; a failed load is retried by the next command
    and nothing is saved until a load succeeds.
    """

    def __init__(self, storage: AddressBookStorage) -> None:
        self._storage = storage
        self._address_book: AddressBook | None = None
        self._displayed: tuple[Person, ...] = ()

    def _loaded_book(self) -> AddressBook:
        if self._address_book is None:
            self._address_book = self._storage.load()
        return self._address_book

    @property
    def address_book(self) -> AddressBook:
        """The live book. Raises StorageError if it cannot be loaded."""
        return self._loaded_book()

    @property
    def displayed_persons(self) -> tuple[Person, ...]:
        return self._displayed

    def execute(self, user_input: str) -> CommandResult:
        """Execute one line of input. Failures come back as feedback, never as exceptions."""
        try:
            address_book = self._loaded_book()
        except StorageError as e:
            logger.exception("Loading address book failed")
            return CommandResult(MESSAGE_STORAGE_LOAD_FAILURE.format(e))

        command = parse_command(user_input)
        command.set_data(address_book, self._displayed)
        result = command.execute()
        logger.info("Executed %s", type(command).__name__)

        if result.relevant_persons is not None:
            self._displayed = tuple(result.relevant_persons)

        if command.mutates_data:
            try:
                self._storage.save(address_book)
            except StorageError as e:
                logger.exception("Saving address book failed")
                return CommandResult(
                    f"{result.feedback_to_user}\n{MESSAGE_STORAGE_FAILURE.format(e)}",
                    result.relevant_persons,
                )
        return result
