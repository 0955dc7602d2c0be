"""In-memory, thread-safe stand-in for Jira ticket operations."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Protocol

_DAY = 86400


class EventPublisher(Protocol):
    """Anything that accepts published events."""

    def publish(self, event: str, data: dict[str, Any]) -> None: ...


@dataclass
class Ticket:
    """A Jira ticket."""

    key: str
    summary: str
    description: str
    status: str  # "Open", "In Progress" or "Done"
    assignee: str
    priority: str  # "Low", "Medium" or "High"
    created_at: int  # Unix timestamp


def _seed_tickets(now: int) -> list[Ticket]:
    return [
        Ticket(
            key="ENG-1",
            summary="Design episodic memory schema",
            description="Define the schema for storing user memory snippets in Qdrant.",
            status="Done",
            assignee="alice",
            priority="High",
            created_at=now - _DAY * 7,
        ),
        Ticket(
            key="ENG-2",
            summary="Implement Vapi tool dispatch",
            description="Build the tool dispatcher and implement all 8 Vapi tools.",
            status="In Progress",
            assignee="bob",
            priority="High",
            created_at=now - _DAY * 5,
        ),
        Ticket(
            key="ENG-3",
            summary="Login redirect race condition",
            description=(
                "Fix race condition in authentication service when multiple "
                "requests arrive simultaneously."
            ),
            status="Open",
            assignee="charlie",
            priority="High",
            created_at=now - _DAY * 2,
        ),
        Ticket(
            key="ENG-4",
            summary="Add observability to critical paths",
            description="Add structured logging and metrics to Qdrant and embed calls.",
            status="Open",
            assignee="",
            priority="Medium",
            created_at=now - _DAY,
        ),
    ]


class JiraMock:
    """In-memory Jira service seeded with a few tickets.

    If ``bus`` is given, every created ticket is published to it.
    """

    def __init__(self, bus: EventPublisher | None = None) -> None:
        self._lock = threading.Lock()
        self._tickets = _seed_tickets(int(time.time()))
        self._counter = len(self._tickets)
        self._bus = bus

    def list(self, assignee: str = "", status: str = "") -> list[Ticket]:
        """Return tickets matching the non-empty filters."""
        with self._lock:
            return [
                ticket
                for ticket in self._tickets
                if (not assignee or ticket.assignee == assignee)
                and (not status or ticket.status == status)
            ]

    def create(
        self, summary: str, description: str, priority: str, assignee: str
    ) -> Ticket:
        """Create an open ticket with the next ENG-n key and return it."""
        with self._lock:
            self._counter += 1
            ticket = Ticket(
                key=f"ENG-{self._counter}",
                summary=summary,
                description=description,
                status="Open",
                assignee=assignee,
                priority=priority,
                created_at=int(time.time()),
            )
            self._tickets.append(ticket)

        if self._bus is not None:
            self._bus.publish(
                "jira_ticket_created",
                {
                    "key": ticket.key,
                    "summary": ticket.summary,
                    "status": ticket.status,
                    "priority": ticket.priority,
                    "assignee": ticket.assignee,
                },
            )
        return ticket