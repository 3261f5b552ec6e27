import io

import pytest
from PIL import Image

from app.application.dispatcher import ConfirmationDispatcher, DispatchConfig
from tests.fakes import FakeEmailOK


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), (120, 60, 200)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return _image_bytes("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG")


@pytest.fixture()
def webp_bytes() -> bytes:
    return _image_bytes("WEBP")


@pytest.fixture()
def gif_bytes() -> bytes:
    return _image_bytes("GIF")


@pytest.fixture()
def exe_bytes() -> bytes:
    # DOS/PE header
    return b"MZ\x90\x00\x03\x00\x00\x00\x04\x00\x00\x00\xff\xff\x00\x00" + b"\x00" * 64


@pytest.fixture()
def logo_file(tmp_path):
    path = tmp_path / "logo_icon.jpg"
    path.write_bytes(_image_bytes("JPEG"))
    return path


@pytest.fixture()
def email_ok():
    return FakeEmailOK()


@pytest.fixture()
def dispatcher(email_ok, logo_file):
    return ConfirmationDispatcher(
        email_ok,
        DispatchConfig(admin_email="admin@example.com", logo_path=str(logo_file)),
    )


@pytest.fixture()
def standard_fields() -> dict[str, str]:
    return {
        "fullName": "Test User",
        "phone": "9999999999",
        "email": "a@b.com",
        "consultationType": "Quick Guidance",
        "utrNumber": "TEST-1",
    }


@pytest.fixture()
def match_fields() -> dict[str, str]:
    return {
        "phone": "9876543210",
        "email": "family@example.com",
        "consultationType": "Marriage Matching",
        "utrNumber": "UTR-778899",
        "price": "1100",
        "girlName": "Anjali",
        "girlDob": "1996-04-12",
        "girlTime": "06:45",
        "girlPlace": "Pune",
        "girlPincode": "411001",
        "boyName": "Rahul",
        "boyDob": "1994-11-02",
        "boyTime": "21:10",
        "boyPlace": "Nagpur",
        "boyPincode": "440001",
    }
