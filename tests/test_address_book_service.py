"""Unit tests for AddressBookService. In-memory storage only."""

from addressbook.application import AddressBookService, StorageError, UpdateCommand, format_result
from addressbook.application.messages import (
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_IN_ADDRESSBOOK,
    MESSAGE_STORAGE_LOAD_FAILURE,
)
from addressbook.domain import AddressBook, Person
from addressbook.infrastructure import InMemoryAddressBookStorage

ADD_JOHN = "add John Doe p/61234567 e/john@doe.com a/395C Ben Road"
ADD_JANE = "add Jane Doe p/91234567 e/jane@doe.com a/33G Ohm Road"
ADD_DAVID = "add David Grant p/61121122 e/david@grant.com a/44H Define Road"


def _service(storage: InMemoryAddressBookStorage | None = None) -> AddressBookService:
    return AddressBookService(storage=storage or InMemoryAddressBookStorage())


def _names(persons) -> list[str]:
    return [p.name.full_name for p in persons]


def test_add_then_list_sets_displayed_persons() -> None:
    service = _service()
    service.execute(ADD_JOHN)
    service.execute(ADD_JANE)
    assert service.displayed_persons == ()

    result = service.execute("list")
    assert result.feedback_to_user == "2 persons listed!"
    assert _names(service.displayed_persons) == ["John Doe", "Jane Doe"]


def test_update_by_displayed_index() -> None:
    service = _service()
    service.execute(ADD_JOHN)
    service.execute(ADD_JANE)
    service.execute("list")
    old = service.displayed_persons[1]

    result = service.execute("update 2 Jane Smith p/91234567 e/jane@smith.com a/33G Ohm Road t/married")
    assert result.feedback_to_user == UpdateCommand.MESSAGE_SUCCESS.format(old)
    assert _names(service.address_book.all_persons()) == ["John Doe", "Jane Smith"]


def test_update_uses_find_results_as_displayed_list() -> None:
    service = _service()
    for command in (ADD_JOHN, ADD_DAVID, ADD_JANE):
        service.execute(command)
    service.execute("find grant")
    assert _names(service.displayed_persons) == ["David Grant"]

    service.execute("update 1 David Grant p/61121122 pe/david@grant.com a/44H Define Road")
    updated = service.address_book.all_persons()[1]
    assert updated.email.is_private is True
    assert service.execute("update 2 John Doe p/1234 e/a@b.co a/x").feedback_to_user == (
        MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    )


def test_update_against_stale_listing_reports_not_found() -> None:
    service = _service()
    service.execute(ADD_JOHN)
    service.execute("list")
    service.execute("clear")

    result = service.execute("update 1 John Doe p/61234567 e/john@doe.com a/395C Ben Road")
    assert result.feedback_to_user == MESSAGE_PERSON_NOT_IN_ADDRESSBOOK


def test_update_to_duplicate_leaves_book_unchanged() -> None:
    service = _service()
    service.execute(ADD_JOHN)
    service.execute(ADD_JANE)
    service.execute("list")
    before = service.address_book.all_persons()

    result = service.execute("update 2 John Doe p/61234567 e/john@doe.com a/395C Ben Road")
    assert result.feedback_to_user == MESSAGE_DUPLICATE_PERSON
    assert service.address_book.all_persons() == before


def test_mutating_commands_are_saved() -> None:
    storage = InMemoryAddressBookStorage()
    service = _service(storage)
    service.execute(ADD_JOHN)
    service.execute("list")
    service.execute("find john")
    assert storage.save_count == 1
    assert _names(storage.load().all_persons()) == ["John Doe"]

    service.execute("delete 1")
    assert storage.save_count == 2
    assert len(storage.load()) == 0


def test_service_loads_existing_book() -> None:
    john = Person.from_raw("John Doe", "61234567", False, "john@doe.com", False, "395C Ben Road", False)
    service = _service(InMemoryAddressBookStorage([john]))
    assert service.address_book == AddressBook([john])


def test_invalid_input_does_not_touch_storage() -> None:
    storage = InMemoryAddressBookStorage()
    service = _service(storage)
    result = service.execute("add John Doe p/abc e/john@doe.com a/395C Ben Road")
    assert "phone" in result.feedback_to_user.lower()
    assert storage.save_count == 0


class _FailingStorage(InMemoryAddressBookStorage):
    def save(self, address_book: AddressBook) -> None:
        raise StorageError("disk on fire")


def test_storage_failure_is_reported_not_raised() -> None:
    service = _service(_FailingStorage())
    result = service.execute(ADD_JOHN)
    assert result.feedback_to_user.startswith("New person added:")
    assert "disk on fire" in result.feedback_to_user
    # The loop keeps going.
    assert service.execute("list").feedback_to_user == "1 persons listed!"


def test_format_result_numbers_persons_and_hides_private() -> None:
    service = _service()
    service.execute("add John Doe pp/61234567 e/john@doe.com a/395C Ben Road")
    service.execute(ADD_JANE)
    text = format_result(service.execute("list"))
    assert text.splitlines() == [
        "1. John Doe Email: john@doe.com Address: 395C Ben Road Tags: ",
        "2. Jane Doe Phone: 91234567 Email: jane@doe.com Address: 33G Ohm Road Tags: ",
        "2 persons listed!",
    ]
    assert format_result(service.execute("help")).startswith("add:")


class _UnreachableStorage(InMemoryAddressBookStorage):
    """Fails to load until `reachable` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.reachable = False

    def load(self) -> AddressBook:
        if not self.reachable:
            raise StorageError("db down")
        return super().load()


def test_load_failure_is_reported_and_nothing_is_saved() -> None:
    storage = _UnreachableStorage()
    service = _service(storage)

    result = service.execute(ADD_JOHN)
    assert result.feedback_to_user == MESSAGE_STORAGE_LOAD_FAILURE.format("db down")
    assert result.relevant_persons is None
    assert storage.save_count == 0


def test_load_is_retried_by_next_command() -> None:
    storage = _UnreachableStorage()
    service = _service(storage)
    service.execute("list")

    storage.reachable = True
    assert service.execute(ADD_JOHN).feedback_to_user.startswith("New person added:")
    assert storage.save_count == 1
