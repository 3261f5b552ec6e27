from __future__ import annotations

import logging
from typing import Sequence

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from app.domain.attachment_guard import check_attachment
from app.domain.entities import Attachment
from app.domain.ports.diagnostics import DiagnosticRecorderPort
from app.schemas.responses import ErrorOut, ValidationErrorOut

logger = logging.getLogger(__name__)


async def read_form(
    request: Request, file_field: str
) -> tuple[dict[str, str], UploadFile | None]:
    """Split a multipart body into plain text fields and the one file part."""
    form = await request.form()
    fields: dict[str, str] = {}
    upload: UploadFile | None = None
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == file_field:
                upload = value
        else:
            fields[key] = value
    return fields, upload


async def read_attachment(
    upload: UploadFile | None, *, default_filename: str, max_bytes: int
) -> Attachment | None:
    if upload is None:
        return None
    # read one byte past the ceiling so oversize files are caught without
    # buffering them whole
    data = await upload.read(max_bytes + 1)
    await upload.close()
    if not data and not upload.filename:
        # browsers send an empty part when no file was picked
        return None
    return check_attachment(
        data, upload.filename, default_filename=default_filename, max_bytes=max_bytes
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorOut(message=message).model_dump()
    )


def validation_error_response(
    endpoint: str,
    fields: dict[str, str],
    errors: Sequence[str],
    diagnostics: DiagnosticRecorderPort,
) -> JSONResponse:
    logger.info(
        "validation failed", extra={"endpoint": endpoint, "errors": list(errors)}
    )
    diagnostics.record(endpoint, fields, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorOut(errors=list(errors)).model_dump(),
    )
