from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from app.domain.entities import (
    ContactInquiry,
    Consultation,
    Invalid,
    MatchConsultation,
    Profile,
    StandardConsultation,
    Valid,
    ValidationResult,
)
from app.schemas.requests import ConsultationIn, ContactIn

M = TypeVar("M", bound=BaseModel)


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "value"


def format_error(error: Mapping[str, Any]) -> str:
    """Turn one pydantic error dict into a message keyed by the wire name."""
    field = _field_name(tuple(error.get("loc", ())))
    kind = error.get("type")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f'"{field}" is required'
    if kind == "string_type":
        return f'"{field}" must be a string'
    if kind == "string_too_short":
        if ctx.get("min_length") == 1 or error.get("input") == "":
            return f'"{field}" is not allowed to be empty'
        return f'"{field}" length must be at least {ctx.get("min_length")} characters long'
    if kind == "string_too_long":
        return (
            f'"{field}" length must be less than or equal to '
            f'{ctx.get("max_length")} characters long'
        )
    if kind == "value_error" and field == "email":
        return '"email" must be a valid email'
    return error.get("msg", f'"{field}" is invalid')


def validate_fields(schema: type[M], fields: Mapping[str, Any]) -> ValidationResult[M]:
    """
    Check every constraint of `schema` against `fields`.
    All violations are reported, in field declaration order.
    """
    try:
        return Valid(schema.model_validate(dict(fields)))
    except ValidationError as exc:
        return Invalid(tuple(format_error(err) for err in exc.errors()))


def _text(value: str | None) -> str:
    return value or ""


def _profile(form: ConsultationIn, prefix: str) -> Profile | None:
    """The ``<prefix>Name``/``Dob``/``Time``/``Place``/``Pincode`` group, or None when blank."""
    values = {
        key: _text(getattr(form, f"{prefix}_{key}"))
        for key in ("name", "dob", "time", "place", "pincode")
    }
    if not any(values.values()):
        return None
    return Profile(**values)


def to_consultation(form: ConsultationIn) -> Consultation:
    """
    Pick the submission variant once: both girl and boy names present
    means a compatibility match, anything else is a standard booking.
    Profile groups that are only partly filled in still travel with the
    submission so they can be shown to the admin.
    """
    common = dict(
        phone=form.phone,
        email=str(form.email),
        consultation_type=form.consultation_type,
        utr_number=form.utr_number,
        full_name=_text(form.full_name),
        price=_text(form.price),
        question=_text(form.question),
        start_date=_text(form.start_date),
        end_date=_text(form.end_date),
        muhurtham_location=_text(form.muhurtham_location),
        dob=_text(form.dob),
        birth_time=_text(form.birth_time),
        birth_place=_text(form.birth_place),
        pincode=_text(form.pincode),
        girl2=_profile(form, "girl2"),
        boy2=_profile(form, "boy2"),
    )
    girl = _profile(form, "girl")
    boy = _profile(form, "boy")

    if form.girl_name and form.boy_name:
        return MatchConsultation(girl=girl, boy=boy, **common)
    return StandardConsultation(girl=girl, boy=boy, **common)


def to_contact(form: ContactIn) -> ContactInquiry:
    return ContactInquiry(
        first_name=form.first_name,
        last_name=form.last_name,
        email=str(form.email),
        message=form.message,
    )


def validate_consultation(fields: Mapping[str, Any]) -> ValidationResult[Consultation]:
    result = validate_fields(ConsultationIn, fields)
    if isinstance(result, Invalid):
        return result
    return Valid(to_consultation(result.value))


def validate_contact(fields: Mapping[str, Any]) -> ValidationResult[ContactInquiry]:
    result = validate_fields(ContactIn, fields)
    if isinstance(result, Invalid):
        return result
    return Valid(to_contact(result.value))
