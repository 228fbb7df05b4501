"""Settings read from the environment, optionally seeded from a .env file."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

STORAGE_NEO4J = "neo4j"
STORAGE_MEMORY = "memory"
_STORAGE_BACKENDS = (STORAGE_NEO4J, STORAGE_MEMORY)

_TRUTHY = ("1", "true", "yes")


def load_env_file(*candidates: Path) -> Path | None:
    """Load the first existing .env among candidates (then cwd). Returns the loaded path."""
    for path in (*candidates, Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


@dataclass(frozen=True)
class Settings:
    storage_backend: str = STORAGE_NEO4J
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    phone_region: str = "SG"
    telegram_bot_token: str | None = None
    use_polling: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.storage_backend not in _STORAGE_BACKENDS:
            raise ValueError(
                f"ADDRESSBOOK_STORAGE must be one of {', '.join(_STORAGE_BACKENDS)}, "
                f"got {self.storage_backend!r}."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(key: str, default: str) -> str:
            return (env.get(key) or default).strip()

        return cls(
            storage_backend=get("ADDRESSBOOK_STORAGE", STORAGE_NEO4J).lower(),
            neo4j_uri=get("NEO4J_URI", "bolt://localhost:7687"),
            neo4j_user=get("NEO4J_USER", "neo4j"),
            neo4j_password=get("NEO4J_PASSWORD", "password"),
            phone_region=get("ADDRESSBOOK_PHONE_REGION", "SG").upper(),
            telegram_bot_token=get("TELEGRAM_BOT_TOKEN", "") or None,
            use_polling=get("USE_POLLING", "").lower() in _TRUTHY,
            log_level=get("LOG_LEVEL", "INFO").upper(),
        )
