from __future__ import annotations

import base64
from pathlib import Path
from typing import Any, Optional

import httpx

from app.domain.entities import EmailAttachment, EmailMessage
from app.domain.ports.email_port import EmailPort


def _encode(attachment: EmailAttachment) -> dict[str, Any]:
    data = attachment.content
    if data is None:
        data = Path(attachment.path).read_bytes()
    return {
        "filename": attachment.filename,
        "cid": attachment.cid,
        "content_type": attachment.content_type,
        "content_b64": base64.b64encode(data).decode("ascii"),
    }


class HttpSmtpEmailAdapter(EmailPort):
    """Posts messages as JSON to a mail sink (see docker/smtp-mock)."""

    def __init__(
        self,
        base_url: str,
        *,
        sender: str = "",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 5.0,
        send_path: str = "/send",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._send_path = send_path if send_path.startswith("/") else f"/{send_path}"
        self._sender = sender
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def send(self, message: EmailMessage) -> None:
        url = f"{self._base_url}{self._send_path}"
        try:
            payload = {
                "from": self._sender,
                "to": message.to,
                "subject": message.subject,
                "html": message.html,
                "attachments": [_encode(a) for a in message.attachments],
            }
        except OSError as e:
            raise RuntimeError(f"SMTP attachment error: {e}") from e

        try:
            resp = await self._client.post(url, json=payload)
            if not (200 <= resp.status_code < 300):
                text = resp.text[:200]
                raise RuntimeError(f"SMTP responded {resp.status_code}: {text}")
        except httpx.HTTPError as e:
            raise RuntimeError(f"SMTP HTTP error: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
