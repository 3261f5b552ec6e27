import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.presentation.dependencies import get_diagnostics, get_email_port
from app.settings import Settings
from tests.fakes import FakeDiagnostics, FakeEmailOK


@pytest.fixture()
def make_settings(logo_file):
    def _make(**overrides) -> Settings:
        values = dict(
            _env_file=None,
            admin_email="admin@example.com",
            logo_path=str(logo_file),
            rate_limit_enabled=False,
            frontend_url="",
            payment_upi_id="astrosharma74@ptyes",
            payment_merchant_name="AstroSharma",
        )
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture()
def make_client(make_settings):
    """Build a fresh app (own limiters, own CORS config) around fake mail/diagnostics."""

    def _make(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides))
        app.dependency_overrides[get_email_port] = lambda: FakeEmailOK()
        app.dependency_overrides[get_diagnostics] = lambda: FakeDiagnostics()
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture()
def app_and_deps(make_settings):
    app = create_app(make_settings())
    email = FakeEmailOK()
    diagnostics = FakeDiagnostics()

    app.dependency_overrides[get_email_port] = lambda: email
    app.dependency_overrides[get_diagnostics] = lambda: diagnostics

    try:
        yield app, email, diagnostics
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
