"""Tests for field value objects, Person, and the unique person collection."""

import pytest

from addressbook.domain import (
    Address,
    AddressBook,
    DuplicatePersonError,
    Email,
    InvalidFormatError,
    Name,
    Person,
    PersonNotFoundError,
    Phone,
    Tag,
    UniquePersonList,
)


def _alice(**overrides) -> Person:
    fields = dict(
        name="Alice Pauline",
        phone="85355255",
        is_phone_private=False,
        email="alice@example.com",
        is_email_private=False,
        address="123, Jurong West Ave 6, #08-111",
        is_address_private=False,
        tags=["friends"],
    )
    fields.update(overrides)
    return Person.from_raw(**fields)


def test_fields_strip_surrounding_whitespace():
    assert Name("  John Doe ").full_name == "John Doe"
    assert Phone(" 123 ").value == "123"
    assert Email(" a@b.co ").value == "a@b.co"
    assert Address("  Blk 1 ").value == "Blk 1"


def test_valid_samples_accepted():
    Name("Peter Jack 2nd")
    Name("Émile Zola")
    Phone("911")
    Phone("124293842033123")
    Email("PeterJack.1190@example.com")
    Email("a1+be.d@example1.com")
    Email("test@localhost.sg")
    Address("-")
    Tag("owesMoney")


def test_phone_too_short_rejected():
    with pytest.raises(InvalidFormatError):
        Phone("91")


def test_name_with_underscore_rejected():
    with pytest.raises(InvalidFormatError):
        Name("peter_jack")


def test_tag_is_not_trimmed():
    with pytest.raises(InvalidFormatError):
        Tag(" friends")


def test_fields_are_immutable():
    name = Name("John")
    with pytest.raises(AttributeError):
        name.full_name = "Jane"


def test_from_raw_fails_on_first_bad_field():
    with pytest.raises(InvalidFormatError) as exc:
        Person.from_raw("", "abc", False, "bad", False, "", False, [""])
    assert exc.value.field == "name"


def test_person_equality_is_full_field():
    assert _alice() == _alice()
    assert hash(_alice()) == hash(_alice())
    assert _alice() != _alice(phone="99999999")
    assert _alice() != _alice(is_email_private=True)
    assert _alice() != _alice(tags=["colleagues"])
    assert _alice(tags=["a", "b"]) == _alice(tags=["b", "a"])


def test_person_text_shows_and_hides_private_fields():
    person = _alice(is_phone_private=True, tags=["friends", "bff"])
    assert person.as_text_show_all() == (
        "Alice Pauline (private) Phone: 85355255 Email: alice@example.com "
        "Address: 123, Jurong West Ave 6, #08-111 Tags: [bff][friends]"
    )
    assert person.as_text_hide_private() == (
        "Alice Pauline Email: alice@example.com "
        "Address: 123, Jurong West Ave 6, #08-111 Tags: [bff][friends]"
    )
    assert str(person) == person.as_text_show_all()


def test_unique_person_list_rejects_duplicates():
    persons = UniquePersonList([_alice()])
    with pytest.raises(DuplicatePersonError):
        persons.add(_alice())
    assert len(persons) == 1


def test_unique_person_list_remove_missing_raises():
    persons = UniquePersonList()
    with pytest.raises(PersonNotFoundError):
        persons.remove(_alice())


def test_replace_missing_target_raises_and_changes_nothing():
    bob = _alice(name="Bob")
    persons = UniquePersonList([bob])
    with pytest.raises(PersonNotFoundError):
        persons.replace(_alice(), _alice(name="Carl"))
    assert persons.as_tuple() == (bob,)


def test_replace_with_other_existing_person_raises_and_changes_nothing():
    alice, bob = _alice(), _alice(name="Bob")
    persons = UniquePersonList([alice, bob])
    with pytest.raises(DuplicatePersonError):
        persons.replace(alice, bob)
    assert persons.as_tuple() == (alice, bob)


def test_replace_keeps_position():
    alice, bob, carl = _alice(), _alice(name="Bob"), _alice(name="Carl")
    persons = UniquePersonList([alice, bob])
    persons.replace(alice, carl)
    assert persons.as_tuple() == (carl, bob)


def test_address_book_tags_and_copy():
    book = AddressBook([_alice(tags=["friends"]), _alice(name="Bob", tags=["work", "friends"])])
    assert book.tags == {Tag("friends"), Tag("work")}

    copy = book.copy()
    assert copy == book
    copy.clear()
    assert len(book) == 2
    assert len(copy) == 0
    assert copy != book


def test_address_book_snapshot_is_read_only():
    book = AddressBook([_alice()])
    snapshot = book.all_persons()
    book.add_person(_alice(name="Bob"))
    assert len(snapshot) == 1
    assert book.contains_person(_alice(name="Bob"))
