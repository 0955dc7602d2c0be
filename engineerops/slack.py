"""In-memory, thread-safe stand-in for Slack messaging."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Protocol

VALID_CHANNELS = frozenset({"#engineering", "#oncall", "#random"})


class EventPublisher(Protocol):
    """Anything that accepts published events."""

    def publish(self, event: str, data: dict[str, Any]) -> None: ...


@dataclass
class Message:
    """A Slack message."""

    channel: str
    user: str
    text: str
    timestamp: int  # Unix timestamp


class UnknownChannelError(ValueError):
    """Raised when posting to a channel that does not exist."""

    def __init__(self, channel: str) -> None:
        super().__init__(f"unknown channel: {channel}")
        self.channel = channel


class SlackMock:
    """In-memory Slack service.

    If ``bus`` is given, every posted message is published to it.
    """

    def __init__(self, bus: EventPublisher | None = None) -> None:
        self._lock = threading.Lock()
        self._messages: list[Message] = []
        self._bus = bus

    def post(self, channel: str, user: str, text: str) -> Message:
        """Post a message to a known channel and return it."""
        if channel not in VALID_CHANNELS:
            raise UnknownChannelError(channel)

        msg = Message(channel=channel, user=user, text=text, timestamp=int(time.time()))
        with self._lock:
            self._messages.append(msg)

        if self._bus is not None:
            self._bus.publish(
                "slack_message_posted",
                {
                    "channel": msg.channel,
                    "user": msg.user,
                    "text": msg.text,
                    "timestamp": msg.timestamp,
                },
            )
        return msg

    def recent(self, channel: str, limit: int) -> list[Message]:
        """Return up to ``limit`` messages in ``channel``, newest first."""
        result: list[Message] = []
        if limit <= 0:
            return result
        with self._lock:
            for msg in reversed(self._messages):
                if msg.channel == channel:
                    result.append(msg)
                    if len(result) >= limit:
                        break
        return result