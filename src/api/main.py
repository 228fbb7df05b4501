"""
FastAPI backend: run address book commands over REST.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from addressbook.infrastructure.config import STORAGE_NEO4J, Settings, load_env_file

# Load .env from repo root (when run from repo root or from Docker)
load_env_file(Path(__file__).resolve().parent.parent.parent / ".env")

from fastapi import FastAPI, Header, HTTPException, Request
from neo4j import GraphDatabase
from pydantic import BaseModel

from addressbook.application import AddressBookService, AddressBookStorage, StorageError
from addressbook.domain import Person
from addressbook.infrastructure import (
    InMemoryAddressBookStorage,
    Neo4jAddressBookStorage,
    ensure_address_book_constraint,
    phone_e164,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=Settings.from_env().log_level,
)
logger = logging.getLogger(__name__)

# Optional: multi-user placeholder. Each user gets their own book and displayed list.
USER_ID_HEADER = "X-User-Id"
DEFAULT_USER_ID = "default"

# Per-user session cache (same user keeps the same displayed list between requests)
_service_cache: dict[str, AddressBookService] = {}


def _get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def _get_cached_driver(app: FastAPI, settings: Settings):
    if getattr(app.state, "driver", None) is None:
        app.state.driver = _get_driver(settings)
    return app.state.driver


def _make_storage(user_id: str, app: FastAPI, settings: Settings) -> AddressBookStorage:
    if settings.storage_backend == STORAGE_NEO4J:
        return Neo4jAddressBookStorage(_get_cached_driver(app, settings), book_id=user_id)
    return InMemoryAddressBookStorage()


def get_service(user_id: str, app: FastAPI) -> AddressBookService:
    service = _service_cache.get(user_id)
    if service is None:
        storage = _make_storage(user_id, app, Settings.from_env())
        # First insert wins, so concurrent first requests share one session.
        service = _service_cache.setdefault(user_id, AddressBookService(storage))
        logger.info("Opened address book for user %s", user_id)
    return service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    settings = Settings.from_env()
    try:
        if settings.storage_backend == STORAGE_NEO4J:
            app.state.driver = _get_driver(settings)
            ensure_address_book_constraint(app.state.driver)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="Address Book API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: commands and persons ---


class CommandBody(BaseModel):
    input: str


class PersonItem(BaseModel):
    """A person with private values hidden (None)."""

    name: str
    phone: str | None = None
    phone_e164: str | None = None
    email: str | None = None
    address: str | None = None
    tags: list[str] = []


class CommandResponse(BaseModel):
    feedback: str
    persons: list[PersonItem] | None = None


def _to_item(person: Person, phone_region: str) -> PersonItem:
    return PersonItem(
        name=person.name.full_name,
        phone=None if person.phone.is_private else person.phone.value,
        phone_e164=phone_e164(person.phone, phone_region),
        email=None if person.email.is_private else person.email.value,
        address=None if person.address.is_private else person.address.value,
        tags=[tag.name for tag in person.sorted_tags()],
    )


@app.post("/commands")
def run_command(
    body: CommandBody,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
) -> CommandResponse:
    user_id = (x_user_id or "").strip() or DEFAULT_USER_ID
    service = get_service(user_id, request.app)
    result = service.execute(body.input)
    region = Settings.from_env().phone_region
    persons = None
    if result.relevant_persons is not None:
        persons = [_to_item(p, region) for p in result.relevant_persons]
    return CommandResponse(feedback=result.feedback_to_user, persons=persons)


@app.get("/persons")
def list_persons(
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
) -> list[PersonItem]:
    """All persons in the book. Does not change the displayed list."""
    user_id = (x_user_id or "").strip() or DEFAULT_USER_ID
    service = get_service(user_id, request.app)
    try:
        persons = service.address_book.all_persons()
    except StorageError as e:
        logger.exception("Loading address book failed for user %s", user_id)
        raise HTTPException(status_code=503, detail=str(e)) from e
    region = Settings.from_env().phone_region
    return [_to_item(p, region) for p in persons]
