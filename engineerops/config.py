"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_PORT = "8080"
DEFAULT_QDRANT_URL = "http://localhost:6334"
DEFAULT_EMBEDDER_URL = "http://localhost:8001"


class ConfigError(ValueError):
    """Raised when a required setting is missing."""


@dataclass
class Config:
    """All application settings."""

    vapi_public_key: str
    vapi_private_key: str
    vapi_shared_secret: str = ""
    vapi_assistant_id: str = ""
    vapi_server_url: str = ""
    qdrant_url: str = DEFAULT_QDRANT_URL
    embedder_url: str = DEFAULT_EMBEDDER_URL
    port: str = DEFAULT_PORT
    github_seed_repos: list[str] = field(default_factory=list)


def _parse_repos(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def load(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from ``environ`` (the process environment by default).

    Raises ConfigError if VAPI_PUBLIC_KEY or VAPI_PRIVATE_KEY is empty.
    """
    env = os.environ if environ is None else environ

    public_key = env.get("VAPI_PUBLIC_KEY", "")
    private_key = env.get("VAPI_PRIVATE_KEY", "")
    if not public_key:
        raise ConfigError("VAPI_PUBLIC_KEY is required")
    if not private_key:
        raise ConfigError("VAPI_PRIVATE_KEY is required")

    return Config(
        vapi_public_key=public_key,
        vapi_private_key=private_key,
        vapi_shared_secret=env.get("VAPI_SHARED_SECRET", ""),
        vapi_assistant_id=env.get("VAPI_ASSISTANT_ID", ""),
        vapi_server_url=env.get("VAPI_SERVER_URL", ""),
        qdrant_url=env.get("QDRANT_URL") or DEFAULT_QDRANT_URL,
        embedder_url=env.get("EMBEDDER_URL") or DEFAULT_EMBEDDER_URL,
        port=env.get("PORT") or DEFAULT_PORT,
        github_seed_repos=_parse_repos(env.get("GITHUB_SEED_REPOS", "")),
    )