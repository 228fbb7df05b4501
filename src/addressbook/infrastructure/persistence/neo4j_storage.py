"""Neo4j implementation of AddressBookStorage.
Graph: (book:AddressBook {id})-[:HAS_CONTACT]->(c:Contact {position, name, phone, ...}).
Each save replaces the whole snapshot of one book in a single write transaction.
"""

import logging

from neo4j.exceptions import DriverError, Neo4jError

from addressbook.application.ports import StorageError
from addressbook.domain import AddressBook, DuplicatePersonError, InvalidFormatError, Person

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT address_book_id_unique IF NOT EXISTS
FOR (b:AddressBook) REQUIRE b.id IS UNIQUE
"""

_LOAD_QUERY = """
MATCH (:AddressBook {id: $book_id})-[:HAS_CONTACT]->(c:Contact)
RETURN c
ORDER BY c.position
"""

_DELETE_CONTACTS_QUERY = """
MERGE (b:AddressBook {id: $book_id})
WITH b
OPTIONAL MATCH (b)-[:HAS_CONTACT]->(c:Contact)
DETACH DELETE c
"""

_CREATE_CONTACTS_QUERY = """
MATCH (b:AddressBook {id: $book_id})
UNWIND $rows AS row
CREATE (b)-[:HAS_CONTACT]->(:Contact {
    position: row.position,
    name: row.name,
    phone: row.phone,
    phone_private: row.phone_private,
    email: row.email,
    email_private: row.email_private,
    address: row.address,
    address_private: row.address_private,
    tags: row.tags
})
"""


def ensure_address_book_constraint(driver: object) -> None:
    """Create the AddressBook id uniqueness constraint. Idempotent."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


def _person_to_row(position: int, person: Person) -> dict:
    return {
        "position": position,
        "name": person.name.full_name,
        "phone": person.phone.value,
        "phone_private": person.phone.is_private,
        "email": person.email.value,
        "email_private": person.email.is_private,
        "address": person.address.value,
        "address_private": person.address.is_private,
        "tags": [tag.name for tag in person.sorted_tags()],
    }


def _node_to_person(c) -> Person:
    return Person.from_raw(
        name=c.get("name"),
        phone=c.get("phone"),
        is_phone_private=bool(c.get("phone_private")),
        email=c.get("email"),
        is_email_private=bool(c.get("email_private")),
        address=c.get("address"),
        is_address_private=bool(c.get("address_private")),
        tags=c.get("tags") or [],
    )


class Neo4jAddressBookStorage:
    """Stores address book snapshots in Neo4j, one AddressBook node per book_id (e.g. per user)."""

    def __init__(self, driver: object, book_id: str = "default") -> None:
        self._driver = driver
        self._book_id = book_id

    def load(self) -> AddressBook:
        try:
            with self._driver.session() as session:
                result = session.run(_LOAD_QUERY, book_id=self._book_id)
                nodes = [record["c"] for record in result]
        except (Neo4jError, DriverError) as e:
            raise StorageError(f"Could not load address book {self._book_id!r}: {e}") from e
        try:
            book = AddressBook(_node_to_person(c) for c in nodes)
        except (InvalidFormatError, DuplicatePersonError) as e:
            raise StorageError(f"Stored address book {self._book_id!r} is invalid: {e}") from e
        logger.debug("Loaded %d contacts for book %s", len(book), self._book_id)
        return book

    def save(self, address_book: AddressBook) -> None:
        rows = [_person_to_row(i, p) for i, p in enumerate(address_book.all_persons())]

        def _replace_snapshot(tx):
            tx.run(_DELETE_CONTACTS_QUERY, book_id=self._book_id)
            if rows:
                tx.run(_CREATE_CONTACTS_QUERY, book_id=self._book_id, rows=rows)

        try:
            with self._driver.session() as session:
                session.execute_write(_replace_snapshot)
        except (Neo4jError, DriverError) as e:
            raise StorageError(f"Could not save address book {self._book_id!r}: {e}") from e
        logger.debug("Saved %d contacts for book %s", len(rows), self._book_id)
