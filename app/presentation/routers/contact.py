import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from app.application.dispatcher import ConfirmationDispatcher
from app.application.submit_contact import submit_contact
from app.application.validate_submission import validate_contact
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

router = APIRouter(tags=["Contact"])


@router.post(
    "/contact",
    response_model=SuccessOut,
    responses={
        400: {"model": ValidationErrorOut},
        413: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
    dependencies=[Depends(enforce_submission_limit)],
)
async def post_contact(
    request: Request,
    dispatcher: Annotated[ConfirmationDispatcher, Depends(get_dispatcher)],
    diagnostics: Annotated[DiagnosticRecorderPort, Depends(get_diagnostics)],
    max_upload_bytes: Annotated[int, Depends(get_max_upload_bytes)],
):
    fields, upload = await read_form(request, file_field="image")
    logger.info("contact request received", extra={"fields": sorted(fields)})

    result = validate_contact(fields)
    if isinstance(result, Invalid):
        return validation_error_response("contact", fields, result.errors, diagnostics)

    try:
        attachment = await read_attachment(
            upload, default_filename="image.jpg", max_bytes=max_upload_bytes
        )
        await submit_contact(dispatcher, result.value, attachment)
    except AttachmentTooLarge as e:
        return error_response(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, e.message)
    except AttachmentRejected as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except Exception:  # noqa: BLE001
        # TransportFailure and anything unexpected, answered inside CORS
        logger.exception("error sending contact message")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )

    return SuccessOut(message="Message sent successfully")
