import pytest

from app.application.book_consultation import (
    USER_SUBJECT as BOOKING_USER_SUBJECT,
    admin_subject,
    book_consultation,
)
from app.application.submit_contact import USER_SUBJECT as CONTACT_USER_SUBJECT, submit_contact
from app.application.validate_submission import validate_consultation
from app.domain.entities import Attachment, ContactInquiry


@pytest.mark.asyncio
async def test_book_standard_consultation(dispatcher, email_ok, standard_fields):
    submission = validate_consultation(standard_fields).value

    await book_consultation(dispatcher, submission, year=2030)

    admin, user = email_ok.messages
    assert admin.to == "admin@example.com"
    assert admin.subject == "New Application: Test User - Quick Guidance"
    assert "New Booking Received" in admin.html
    assert "Client Name" in admin.html
    assert "&copy; 2030" in admin.html

    assert user.to == "a@b.com"
    assert user.subject == BOOKING_USER_SUBJECT
    assert "Booking Confirmation" in user.html
    assert "Namaste Test User," in user.html
    assert "(UTR: TEST-1)" in user.html


@pytest.mark.asyncio
async def test_book_match_consultation(dispatcher, email_ok, match_fields):
    submission = validate_consultation(match_fields).value

    await book_consultation(dispatcher, submission)

    admin, user = email_ok.messages
    assert admin.subject == "New Application: Marriage Match - Marriage Matching"
    assert "Girl" in admin.html and "Boy" in admin.html
    assert user.to == "family@example.com"


def test_admin_subject_without_name(standard_fields):
    fields = {k: v for k, v in standard_fields.items() if k != "fullName"}
    submission = validate_consultation(fields).value
    assert admin_subject(submission) == "New Application: Unnamed client - Quick Guidance"


@pytest.mark.asyncio
async def test_booking_is_not_idempotent(dispatcher, email_ok, standard_fields):
    submission = validate_consultation(standard_fields).value

    await book_consultation(dispatcher, submission)
    await book_consultation(dispatcher, submission)

    assert len(email_ok.messages) == 4


@pytest.mark.asyncio
async def test_contact_sends_both(dispatcher, email_ok, png_bytes):
    inquiry = ContactInquiry(
        first_name="Priya", last_name="Nair", email="priya@example.com", message="Hello there"
    )
    upload = Attachment(filename="chart.png", data=png_bytes, mime_type="image/png")

    await submit_contact(dispatcher, inquiry, upload)

    admin, user = email_ok.messages
    assert admin.subject == "New Contact Inquiry: Priya Nair"
    assert "New Contact Inquiry" in admin.html
    assert [a.filename for a in admin.attachments] == ["logo.jpg", "chart.png"]
    assert user.to == "priya@example.com"
    assert user.subject == CONTACT_USER_SUBJECT
    assert "Namaste Priya" in user.html
    assert "Hello there" in user.html
