import logging
import sys

from fastapi import FastAPI, Response, status
from pydantic import BaseModel, EmailStr, Field

logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)sZ %(levelname)s %(message)s")

app = FastAPI(title="SMTP Mock", version="1.0.0")


class MailAttachment(BaseModel):
    filename: str
    cid: str | None = None
    content_type: str | None = None
    content_b64: str


class SendEmail(BaseModel):
    sender: str = Field("", alias="from")
    to: EmailStr
    subject: str
    html: str
    attachments: list[MailAttachment] = []


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/send", status_code=status.HTTP_202_ACCEPTED)
async def send(payload: SendEmail) -> Response:
    names = [a.filename + (f" (cid:{a.cid})" if a.cid else "") for a in payload.attachments]
    logging.info(
        "SMTP-MOCK send from=%s to=%s subject=%r attachments=%s html_chars=%d",
        payload.sender, payload.to, payload.subject, names, len(payload.html),
    )
    return Response(status_code=status.HTTP_202_ACCEPTED)
