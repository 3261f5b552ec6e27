from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.templates import LOGO_CID
from app.domain.entities import Attachment, EmailAttachment, EmailMessage
from app.domain.errors import TransportFailure
from app.domain.ports.email_port import EmailPort
from app.domain.services import single_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchConfig:
    admin_email: str
    logo_path: str
    logo_filename: str = "logo.jpg"
    logo_cid: str = LOGO_CID


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str


class ConfirmationDispatcher:
    """
    Sends the admin notification and the user acknowledgment for one
    submission. Admin goes first; the first failure aborts the pair and
    nothing is retried.
    """

    def __init__(self, email_port: EmailPort, config: DispatchConfig) -> None:
        self._email = email_port
        self._config = config

    def logo_attachment(self) -> EmailAttachment:
        return EmailAttachment(
            filename=self._config.logo_filename,
            path=self._config.logo_path,
            cid=self._config.logo_cid,
        )

    def compose(
        self,
        *,
        user_email: str,
        admin: RenderedEmail,
        user: RenderedEmail,
        attachment: Attachment | None = None,
    ) -> tuple[EmailMessage, EmailMessage]:
        logo = self.logo_attachment()
        admin_attachments: tuple[EmailAttachment, ...] = (logo,)
        if attachment is not None:
            admin_attachments += (
                EmailAttachment(
                    filename=attachment.filename,
                    content=attachment.data,
                    content_type=attachment.mime_type,
                ),
            )

        admin_message = EmailMessage(
            to=self._config.admin_email,
            subject=single_line(admin.subject),
            html=admin.html,
            attachments=admin_attachments,
        )
        user_message = EmailMessage(
            to=user_email,
            subject=single_line(user.subject),
            html=user.html,
            attachments=(logo,),
        )
        return admin_message, user_message

    async def dispatch(
        self,
        *,
        user_email: str,
        admin: RenderedEmail,
        user: RenderedEmail,
        attachment: Attachment | None = None,
    ) -> None:
        for message in self.compose(
            user_email=user_email, admin=admin, user=user, attachment=attachment
        ):
            await self._send(message)

    async def _send(self, message: EmailMessage) -> None:
        try:
            await self._email.send(message)
        except Exception as e:  # noqa: BLE001
            logger.error(
                "email send failed",
                extra={"subject": message.subject, "error": str(e)},
            )
            raise TransportFailure(str(e)) from e
        logger.info("email sent", extra={"subject": message.subject})
