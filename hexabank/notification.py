"""Notification domain: model, sender port and service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Notification:
    """A notification carrying a text message."""

    message: str


class MessageSender(Protocol):
    """Anything that can deliver a text message, such as a chat webhook."""

    def send_message(self, message: str) -> None:
        """Deliver ``message``; raise on failure."""
        ...


class NotificationService:
    """Delivers notifications through a message sender."""

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def send_notification(self, message: str) -> None:
        """Send ``message``; errors from the sender propagate unchanged."""
        self._sender.send_message(message)