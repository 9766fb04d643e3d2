"""
Outbound message delivery.

``ConsoleNotifier`` stands in for an SMS gateway: it writes the message to
the log and always reports success.
"""
from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Defines the one operation the workflow needs from a message gateway."""

    def send(self, destination: str, message: str) -> bool:
        ...


class ConsoleNotifier:
    def send(self, destination: str, message: str) -> bool:
        logger.info("SMS to %s: %s", destination, message)
        return True
