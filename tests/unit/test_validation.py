from app.application.validate_submission import (
    validate_consultation,
    validate_contact,
    validate_fields,
)
from app.domain.entities import (
    ContactInquiry,
    Invalid,
    MatchConsultation,
    StandardConsultation,
    Valid,
)
from app.schemas.requests import ConsultationIn, PHONE_MESSAGE


def test_missing_required_consultation_fields_all_reported():
    result = validate_consultation({})
    assert isinstance(result, Invalid)
    assert result.errors == (
        '"phone" is required',
        '"email" is required',
        '"consultationType" is required',
        '"utrNumber" is required',
    )


def test_phone_pattern(standard_fields):
    for bad in ("12345", "abcdefghij", "98765432101", "98765 4321"):
        result = validate_consultation({**standard_fields, "phone": bad})
        assert isinstance(result, Invalid)
        assert result.errors == (PHONE_MESSAGE,)
    assert PHONE_MESSAGE == "Phone number must be exactly 10 digits."

    ok = validate_consultation({**standard_fields, "phone": "9876543210"})
    assert isinstance(ok, Valid)


def test_empty_required_strings_and_bad_email(standard_fields):
    result = validate_consultation(
        {**standard_fields, "email": "not-an-email", "consultationType": "", "utrNumber": ""}
    )
    assert isinstance(result, Invalid)
    assert result.errors == (
        '"email" must be a valid email',
        '"consultationType" is not allowed to be empty',
        '"utrNumber" is not allowed to be empty',
    )


def test_optional_fields_accept_empty_strings(standard_fields):
    result = validate_consultation(
        {**standard_fields, "fullName": "", "dob": "", "question": "", "girlName": ""}
    )
    assert isinstance(result, Valid)
    assert isinstance(result.value, StandardConsultation)


def test_full_name_length_when_given(standard_fields):
    result = validate_consultation({**standard_fields, "fullName": "A"})
    assert isinstance(result, Invalid)
    assert len(result.errors) == 1
    assert "fullName" in result.errors[0]


def test_unknown_fields_pass_through(standard_fields):
    result = validate_fields(ConsultationIn, {**standard_fields, "captchaToken": "abc"})
    assert isinstance(result, Valid)
    assert result.value.model_extra == {"captchaToken": "abc"}


def test_standard_variant_built(standard_fields):
    result = validate_consultation(
        {**standard_fields, "dob": "1990-01-01", "birthTime": "14:30", "price": "501"}
    )
    assert isinstance(result, Valid)
    s = result.value
    assert isinstance(s, StandardConsultation)
    assert s.full_name == "Test User"
    assert s.birth_time == "14:30"
    assert s.price == "501"
    assert s.question == ""


def test_match_variant_needs_both_names(match_fields):
    result = validate_consultation(match_fields)
    assert isinstance(result, Valid)
    m = result.value
    assert isinstance(m, MatchConsultation)
    assert m.girl.name == "Anjali"
    assert m.boy.pincode == "440001"
    assert m.girl2 is None and m.boy2 is None

    only_girl = {k: v for k, v in match_fields.items() if not k.startswith("boy")}
    result = validate_consultation(only_girl)
    assert isinstance(result, Valid)
    assert isinstance(result.value, StandardConsultation)


def test_match_variant_with_rematch_profiles(match_fields):
    fields = {
        **match_fields,
        "girl2Name": "Meera",
        "girl2Time": "10:00",
        "boy2Name": "Vikram",
    }
    result = validate_consultation(fields)
    assert isinstance(result, Valid)
    assert result.value.girl2.name == "Meera"
    assert result.value.girl2.time == "10:00"
    assert result.value.boy2.name == "Vikram"
    assert result.value.boy2.dob == ""


def test_contact_missing_fields_all_reported():
    result = validate_contact({})
    assert isinstance(result, Invalid)
    assert result.errors == (
        '"firstName" is required',
        '"lastName" is required',
        '"email" is required',
        '"message" is required',
    )


def test_contact_length_bounds():
    result = validate_contact(
        {
            "firstName": "A",
            "lastName": "B" * 51,
            "email": "someone@example.com",
            "message": "x" * 1001,
        }
    )
    assert isinstance(result, Invalid)
    assert result.errors == (
        '"firstName" length must be at least 2 characters long',
        '"lastName" length must be less than or equal to 50 characters long',
        '"message" length must be less than or equal to 1000 characters long',
    )


def test_contact_valid():
    result = validate_contact(
        {
            "firstName": "Priya",
            "lastName": "Nair",
            "email": "priya@example.com",
            "message": "When is the next slot?",
        }
    )
    assert isinstance(result, Valid)
    assert result.value == ContactInquiry(
        first_name="Priya",
        last_name="Nair",
        email="priya@example.com",
        message="When is the next slot?",
    )
    assert result.value.full_name == "Priya Nair"


def test_empty_values_read_as_not_allowed_to_be_empty(standard_fields):
    booking = validate_consultation({**standard_fields, "phone": ""})
    assert isinstance(booking, Invalid)
    assert booking.errors == ('"phone" is not allowed to be empty',)

    contact = validate_contact(
        {"firstName": "", "lastName": "Nair", "email": "p@example.com", "message": ""}
    )
    assert isinstance(contact, Invalid)
    assert contact.errors == (
        '"firstName" is not allowed to be empty',
        '"message" is not allowed to be empty',
    )
