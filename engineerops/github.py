"""In-memory stand-in for GitHub pull request queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PR:
    """A GitHub pull request."""

    number: int
    title: str
    author: str
    status: str  # "open", "merged" or "closed"
    body: str
    files: list[str] = field(default_factory=list)


def _seed_prs() -> list[PR]:
    return [
        PR(
            number=234,
            title="Fix login redirect race condition",
            author="alice",
            status="open",
            body=(
                "Fixes the race condition in the auth service login redirect "
                "flow when multiple requests arrive simultaneously."
            ),
            files=["auth/login.go", "auth/session.go"],
        ),
        PR(
            number=235,
            title="Add Qdrant retry logic with exponential backoff",
            author="bob",
            status="open",
            body=(
                "Implements retry logic with exponential backoff for transient "
                "failures in Qdrant calls."
            ),
            files=["internal/qdrant/client.go", "internal/qdrant/retry.go"],
        ),
        PR(
            number=232,
            title="Bump deepgram-sdk to v0.13.0",
            author="charlie",
            status="merged",
            body=(
                "Updates deepgram-sdk to the latest version for better "
                "performance and bug fixes."
            ),
            files=["go.mod", "go.sum"],
        ),
        PR(
            number=230,
            title="Add observability: structured logging + metrics",
            author="alice",
            status="open",
            body=(
                "Adds structured logging using slog and exports Prometheus "
                "metrics for key operations."
            ),
            files=["internal/log/log.go", "internal/metrics/metrics.go"],
        ),
        PR(
            number=225,
            title="Refactor memory.Manager interface",
            author="david",
            status="merged",
            body=(
                "Simplifies the memory manager interface for better "
                "testability and clearer semantics."
            ),
            files=["internal/memory/memory.go", "internal/memory/memory_test.go"],
        ),
    ]


class GitHubMock:
    """In-memory GitHub service seeded with a fixed set of pull requests."""

    def __init__(self) -> None:
        self._prs = _seed_prs()

    def list_open_prs(self, author: str = "") -> list[PR]:
        """Return open PRs, restricted to ``author`` when it is non-empty."""
        return [
            pr
            for pr in self._prs
            if pr.status == "open" and (not author or pr.author == author)
        ]

    def get_pr(self, number: int) -> PR | None:
        """Return the PR with the given number, or None if there is none."""
        return next((pr for pr in self._prs if pr.number == number), None)