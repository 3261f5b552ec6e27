import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from app.application.book_consultation import book_consultation
from app.application.dispatcher import ConfirmationDispatcher
from app.application.validate_submission import validate_consultation
from app.domain.entities import Invalid
from app.domain.errors import AttachmentRejected, AttachmentTooLarge
from app.domain.ports.diagnostics import DiagnosticRecorderPort
from app.presentation.dependencies import (
    enforce_submission_limit,
    get_diagnostics,
    get_dispatcher,
    get_max_upload_bytes,
)
from app.presentation.forms import (
    error_response,
    read_attachment,
    read_form,
    validation_error_response,
)
from app.schemas.responses import ErrorOut, SuccessOut, ValidationErrorOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Booking"])


@router.post(
    "/book-consultation",
    response_model=SuccessOut,
    responses={
        400: {"model": ValidationErrorOut},
        413: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
    dependencies=[Depends(enforce_submission_limit)],
)
async def post_book_consultation(
    request: Request,
    dispatcher: Annotated[ConfirmationDispatcher, Depends(get_dispatcher)],
    diagnostics: Annotated[DiagnosticRecorderPort, Depends(get_diagnostics)],
    max_upload_bytes: Annotated[int, Depends(get_max_upload_bytes)],
):
    fields, upload = await read_form(request, file_field="screenshot")
    logger.info("booking request received", extra={"fields": sorted(fields)})

    result = validate_consultation(fields)
    if isinstance(result, Invalid):
        return validation_error_response("booking", fields, result.errors, diagnostics)

    try:
        attachment = await read_attachment(
            upload, default_filename="screenshot.jpg", max_bytes=max_upload_bytes
        )
        await book_consultation(dispatcher, result.value, attachment)
    except AttachmentTooLarge as e:
        return error_response(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, e.message)
    except AttachmentRejected as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except Exception:  # noqa: BLE001
        # TransportFailure and anything unexpected, answered inside CORS
        logger.exception("error processing booking")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )

    return SuccessOut(message="Booking processed successfully")
