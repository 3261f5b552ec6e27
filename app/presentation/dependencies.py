from typing import Annotated

from fastapi import Depends, Request

from app.application.dispatcher import ConfirmationDispatcher, DispatchConfig
from app.domain.entities import PaymentConfig
from app.domain.errors import RateLimitExceeded
from app.domain.ports.diagnostics import DiagnosticRecorderPort
from app.domain.ports.email_port import EmailPort
from app.infrastructure.diagnostics.file_recorder import FileDiagnosticRecorder
from app.infrastructure.security.rate_limit import client_ip
from app.settings import Settings

SUBMISSION_LIMIT_MESSAGE = "Too many requests, please try again later."


def get_app_settings(request: Request) -> Settings:
    # Set in app.main create_app()
    return request.app.state.settings


def get_email_port(request: Request) -> EmailPort:
    # This is set in app.main lifespan()
    return request.app.state.email_adapter


def get_dispatch_config(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> DispatchConfig:
    return DispatchConfig(admin_email=settings.admin_email, logo_path=settings.logo_path)


def get_dispatcher(
    email_port: Annotated[EmailPort, Depends(get_email_port)],
    config: Annotated[DispatchConfig, Depends(get_dispatch_config)],
) -> ConfirmationDispatcher:
    return ConfirmationDispatcher(email_port, config)


def get_diagnostics(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> DiagnosticRecorderPort:
    return FileDiagnosticRecorder(settings.diagnostic_log_path)


def get_max_upload_bytes(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> int:
    return settings.max_upload_bytes


def get_payment_config(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PaymentConfig:
    return PaymentConfig(
        upi_id=settings.payment_upi_id,
        merchant_name=settings.payment_merchant_name,
    )


def enforce_submission_limit(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> None:
    limiter = getattr(request.app.state, "submission_limiter", None)
    if limiter is None:
        return
    if not limiter.hit(client_ip(request, settings.trust_proxy)):
        raise RateLimitExceeded(SUBMISSION_LIMIT_MESSAGE)
