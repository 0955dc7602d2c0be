"""Splitting of markdown documents into citable chunks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Chunk:
    """A piece of text taken from a source document."""

    text: str
    source_path: str
    title: str
    heading_path: str = ""  # breadcrumb such as "Deployment > Staging"
    index: int = 0


def markdown_chunks(
    source_path: str,
    title: str,
    content: str,
    target_tokens: int,
    overlap_tokens: int,
) -> list[Chunk]:
    """Split markdown content into chunks.

    The whole document is currently returned as a single chunk; the token
    targets are accepted for callers that size their chunks.
    """
    del target_tokens, overlap_tokens
    return [
        Chunk(
            text=content,
            source_path=source_path,
            title=title,
            heading_path="",
            index=0,
        )
    ]


def estimate_tokens(s: str) -> int:
    """Estimate tokens as one per four bytes of UTF-8."""
    return len(s.encode("utf-8")) // 4