"""HTTP client for the text-embedding sidecar service."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Iterable

DEFAULT_TIMEOUT = 10.0


class EmbedError(RuntimeError):
    """Raised when the embedding service cannot be reached or answers badly."""


def _decode_vectors(body: bytes) -> list[list[float]]:
    try:
        payload = json.loads(body)
    except ValueError as err:
        raise EmbedError(f"decode embed response: {err}") from err
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise EmbedError("decode embed response: expected a JSON object")

    vectors = payload.get("vectors")
    if vectors is None:
        return []
    if not isinstance(vectors, list):
        raise EmbedError("decode embed response: vectors is not a list")

    decoded: list[list[float]] = []
    for vector in vectors:
        if vector is None:
            decoded.append([])
            continue
        if not isinstance(vector, list) or not all(
            isinstance(x, (int, float)) and not isinstance(x, bool) for x in vector
        ):
            raise EmbedError("decode embed response: vector is not a list of numbers")
        decoded.append([float(x) for x in vector])
    return decoded


class EmbedClient:
    """Talks to the embedding sidecar over HTTP."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def embed(self, texts: Iterable[str]) -> list[list[float]]:
        """Return one embedding vector per text."""
        payload = json.dumps({"texts": list(texts)}).encode("utf-8")
        try:
            request = urllib.request.Request(
                self.base_url + "/embed",
                data=payload,
                method="POST",
                headers={"Content-Type": "application/json"},
            )
        except ValueError as err:
            raise EmbedError(f"create embed request: {err}") from err

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                status = resp.status
                body = resp.read()
        except urllib.error.HTTPError as err:
            err.close()
            raise EmbedError(f"embed returned status {err.code}") from None
        except (urllib.error.URLError, OSError) as err:
            raise EmbedError(f"embed request failed: {err}") from err

        if status != 200:
            raise EmbedError(f"embed returned status {status}")
        return _decode_vectors(body)

    def health(self) -> None:
        """Check the sidecar's health endpoint; raise EmbedError if unhealthy."""
        try:
            request = urllib.request.Request(self.base_url + "/health", method="GET")
        except ValueError as err:
            raise EmbedError(f"create health request: {err}") from err

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                status = resp.status
        except urllib.error.HTTPError as err:
            err.close()
            raise EmbedError(f"health returned status {err.code}") from None
        except (urllib.error.URLError, OSError) as err:
            raise EmbedError(f"health check failed: {err}") from err

        if status != 200:
            raise EmbedError(f"health returned status {status}")