from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

PHONE_MESSAGE = "Phone number must be exactly 10 digits."

OptionalText = Optional[str]


class ConsultationIn(BaseModel):
    """
    Booking form. Everything except phone/email/consultationType/utrNumber
    may be left empty; unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    phone: str = Field(..., description="10 digit mobile number")
    email: EmailStr = Field(..., description="Client email")
    consultation_type: str = Field(..., alias="consultationType", min_length=1)
    utr_number: str = Field(..., alias="utrNumber", min_length=1)

    full_name: OptionalText = Field(None, alias="fullName")
    dob: OptionalText = None
    birth_time: OptionalText = Field(None, alias="birthTime")
    birth_place: OptionalText = Field(None, alias="birthPlace")
    pincode: OptionalText = None
    question: OptionalText = None
    price: OptionalText = None

    girl_name: OptionalText = Field(None, alias="girlName")
    girl_dob: OptionalText = Field(None, alias="girlDob")
    girl_time: OptionalText = Field(None, alias="girlTime")
    girl_place: OptionalText = Field(None, alias="girlPlace")
    girl_pincode: OptionalText = Field(None, alias="girlPincode")
    boy_name: OptionalText = Field(None, alias="boyName")
    boy_dob: OptionalText = Field(None, alias="boyDob")
    boy_time: OptionalText = Field(None, alias="boyTime")
    boy_place: OptionalText = Field(None, alias="boyPlace")
    boy_pincode: OptionalText = Field(None, alias="boyPincode")

    girl2_name: OptionalText = Field(None, alias="girl2Name")
    girl2_dob: OptionalText = Field(None, alias="girl2Dob")
    girl2_time: OptionalText = Field(None, alias="girl2Time")
    girl2_place: OptionalText = Field(None, alias="girl2Place")
    girl2_pincode: OptionalText = Field(None, alias="girl2Pincode")
    boy2_name: OptionalText = Field(None, alias="boy2Name")
    boy2_dob: OptionalText = Field(None, alias="boy2Dob")
    boy2_time: OptionalText = Field(None, alias="boy2Time")
    boy2_place: OptionalText = Field(None, alias="boy2Place")
    boy2_pincode: OptionalText = Field(None, alias="boy2Pincode")

    start_date: OptionalText = Field(None, alias="startDate")
    end_date: OptionalText = Field(None, alias="endDate")
    muhurtham_location: OptionalText = Field(None, alias="muhurthamLocation")

    @field_validator("phone")
    @classmethod
    def _phone_digits(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("string_empty", '"phone" is not allowed to be empty')
        if len(value) != 10 or not value.isascii() or not value.isdigit():
            raise PydanticCustomError("phone_pattern", PHONE_MESSAGE)
        return value

    @field_validator("full_name")
    @classmethod
    def _full_name_length(cls, value: OptionalText) -> OptionalText:
        if value and not 2 <= len(value) <= 100:
            raise PydanticCustomError(
                "full_name_length",
                '"fullName" length must be between 2 and 100 characters long',
            )
        return value


class ContactIn(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=2, max_length=50)
    last_name: str = Field(..., alias="lastName", min_length=2, max_length=50)
    email: EmailStr = Field(..., description="Where the auto-reply goes")
    message: str = Field(..., min_length=3, max_length=1000)
