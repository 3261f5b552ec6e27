import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.domain.errors import RateLimitExceeded
from app.domain.ports.email_port import EmailPort
from app.infrastructure.email.http_smtp_adapter import HttpSmtpEmailAdapter
from app.infrastructure.email.smtp_adapter import SmtpEmailAdapter
from app.infrastructure.security.rate_limit import SlidingWindowLimiter, client_ip
from app.logging import setup_logging
from app.presentation.api import api
from app.schemas.responses import ErrorOut, INTERNAL_ERROR
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:5174",
    "https://astrosharma.vercel.app",
)
GLOBAL_LIMIT_MESSAGE = (
    "Too many requests from this IP, please try again after 15 minutes"
)


def normalize_origin(url: str | None) -> str:
    return url.rstrip("/") if url else ""


def get_cors_origins(settings: Settings) -> list[str]:
    """Fixed frontends plus FRONTEND_URL, without trailing slashes."""
    origins = [normalize_origin(o) for o in (*DEFAULT_ORIGINS, settings.frontend_url)]
    return [o for o in dict.fromkeys(origins) if o]


def build_email_adapter(settings: Settings) -> EmailPort:
    if settings.mail_transport == "http":
        return HttpSmtpEmailAdapter(
            base_url=settings.smtp_base_url,
            sender=settings.sender_address,
            timeout=settings.smtp_timeout_seconds,
        )
    return SmtpEmailAdapter(
        settings.smtp_host,
        settings.smtp_port,
        sender=settings.sender_address,
        username=settings.smtp_user,
        password=settings.smtp_pass,
        secure=settings.smtp_secure,
        timeout=settings.smtp_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    email_adapter = build_email_adapter(app.state.settings)
    app.state.email_adapter = email_adapter  # expose to dependencies
    logger.info(
        "mail transport ready", extra={"transport": app.state.settings.mail_transport}
    )

    try:
        yield
    finally:
        # shutdown
        await email_adapter.aclose()


def _install_rate_limits(app: FastAPI, settings: Settings) -> None:
    app.state.global_limiter = None
    app.state.submission_limiter = None
    if not settings.rate_limit_enabled:
        return

    global_limiter = SlidingWindowLimiter(
        settings.global_rate_limit_max, settings.global_rate_limit_window_seconds
    )
    app.state.global_limiter = global_limiter
    app.state.submission_limiter = SlidingWindowLimiter(
        settings.submission_rate_limit_max,
        settings.submission_rate_limit_window_seconds,
    )

    @app.middleware("http")
    async def global_rate_limit(request: Request, call_next):
        if not global_limiter.hit(client_ip(request, settings.trust_proxy)):
            return PlainTextResponse(
                GLOBAL_LIMIT_MESSAGE, status_code=status.HTTP_429_TOO_MANY_REQUESTS
            )
        return await call_next(request)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RateLimitExceeded)
    async def rate_limited(_: Request, exc: RateLimitExceeded) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=ErrorOut(message=exc.message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled error",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR.model_dump(),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="Astro Booking API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    # added first so CORS headers also wrap 429 responses
    _install_rate_limits(app, settings)

    origins = get_cors_origins(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # no FRONTEND_URL configured: development, any origin
        allow_origin_regex=None if settings.frontend_url else ".*",
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(GZipMiddleware)

    _install_error_handlers(app)
    app.include_router(api)
    return app


app = create_app()
