from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Mail
    mail_transport: Literal["smtp", "http"] = "smtp"
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: str = ""
    smtp_pass: str = ""
    smtp_from_email: str = ""
    smtp_timeout_seconds: float = 10.0
    smtp_base_url: str = "http://smtp-mock:8025"
    admin_email: str = ""
    logo_path: str = "assets/logo_icon.jpg"

    # Payment
    payment_upi_id: str = "astrosharma74@ptyes"
    payment_merchant_name: str = "AstroSharma"

    # Web
    frontend_url: str = ""
    trust_proxy: bool = True

    # Uploads / diagnostics
    max_upload_bytes: int = 5 * 1024 * 1024
    diagnostic_log_path: str = "validation_error.log"

    # Rate limits
    rate_limit_enabled: bool = True
    global_rate_limit_max: int = 100
    global_rate_limit_window_seconds: int = 15 * 60
    submission_rate_limit_max: int = 10
    submission_rate_limit_window_seconds: int = 60 * 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("logo_path")
    @classmethod
    def _resolve_logo_path(cls, value: str) -> str:
        # relative to the project, not the working directory
        path = Path(value)
        return str(path if path.is_absolute() else PROJECT_ROOT / path)

    @property
    def sender_address(self) -> str:
        return self.smtp_from_email or self.smtp_user


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
