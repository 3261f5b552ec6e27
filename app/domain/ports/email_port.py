from __future__ import annotations

from typing import Protocol

from app.domain.entities import EmailMessage


class EmailPort(Protocol):
    async def send(self, message: EmailMessage) -> None:
        """Hand one message to the mail transport. Raises on failure."""

    async def aclose(self) -> None:
        """Release transport resources."""
