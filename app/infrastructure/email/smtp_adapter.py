from __future__ import annotations

import asyncio
import mimetypes
import smtplib
import ssl
from email.message import EmailMessage as MimeMessage
from pathlib import Path

from app.domain.entities import EmailAttachment, EmailMessage
from app.domain.ports.email_port import EmailPort


def _split_type(attachment: EmailAttachment) -> tuple[str, str]:
    # uploads carry the type sniffed from their bytes; only the logo is guessed
    content_type = attachment.content_type
    if content_type is None:
        content_type, _ = mimetypes.guess_type(attachment.filename)
    maintype, _, subtype = (content_type or "application/octet-stream").partition("/")
    return maintype, subtype


def _read(attachment: EmailAttachment) -> bytes:
    if attachment.content is not None:
        return attachment.content
    return Path(attachment.path).read_bytes()


def build_mime(message: EmailMessage, sender: str) -> MimeMessage:
    """
    HTML body with inline (cid) parts as multipart/related, regular files
    appended as attachments.
    """
    mime = MimeMessage()
    mime["Subject"] = message.subject
    mime["From"] = sender
    mime["To"] = message.to
    mime.set_content(message.html, subtype="html")

    for attachment in message.attachments:
        if attachment.cid:
            maintype, subtype = _split_type(attachment)
            mime.add_related(
                _read(attachment),
                maintype=maintype,
                subtype=subtype,
                cid=f"<{attachment.cid}>",
                filename=attachment.filename,
            )

    for attachment in message.attachments:
        if not attachment.cid:
            maintype, subtype = _split_type(attachment)
            mime.add_attachment(
                _read(attachment),
                maintype=maintype,
                subtype=subtype,
                filename=attachment.filename,
            )
    return mime


class SmtpEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int,
        *,
        sender: str,
        username: str = "",
        password: str = "",
        secure: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._username = username
        self._password = password
        self._secure = secure
        self._timeout = timeout

    async def send(self, message: EmailMessage) -> None:
        try:
            mime = build_mime(message, self._sender)
            await asyncio.to_thread(self._deliver, mime)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise RuntimeError(f"SMTP error: {e}") from e

    def _deliver(self, mime: MimeMessage) -> None:
        context = ssl.create_default_context()
        if self._secure:
            server = smtplib.SMTP_SSL(
                self._host, self._port, context=context, timeout=self._timeout
            )
        else:
            server = smtplib.SMTP(self._host, self._port, timeout=self._timeout)

        with server:
            if not self._secure:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls(context=context)
                    server.ehlo()
            if self._username:
                server.login(self._username, self._password)
            server.send_message(mime)

    async def aclose(self) -> None:
        # one connection per message, nothing held open
        return None
