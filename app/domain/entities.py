from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Profile:
    name: str
    dob: str = ""
    time: str = ""
    place: str = ""
    pincode: str = ""


@dataclass(frozen=True, kw_only=True)
class ConsultationBase:
    phone: str
    email: str
    consultation_type: str
    utr_number: str
    full_name: str = ""
    price: str = ""
    question: str = ""
    start_date: str = ""
    end_date: str = ""
    muhurtham_location: str = ""
    # single person birth details
    dob: str = ""
    birth_time: str = ""
    birth_place: str = ""
    pincode: str = ""
    # rematch profiles, set when any of their fields is filled in
    girl2: Profile | None = None
    boy2: Profile | None = None


@dataclass(frozen=True, kw_only=True)
class StandardConsultation(ConsultationBase):
    # a half filled match form; the pair table needs both names
    girl: Profile | None = None
    boy: Profile | None = None


@dataclass(frozen=True, kw_only=True)
class MatchConsultation(ConsultationBase):
    girl: Profile
    boy: Profile


Consultation = Union[StandardConsultation, MatchConsultation]


@dataclass(frozen=True)
class ContactInquiry:
    first_name: str
    last_name: str
    email: str
    message: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Attachment:
    """An uploaded image that passed the signature check."""

    filename: str
    data: bytes
    mime_type: str


@dataclass(frozen=True)
class EmailAttachment:
    filename: str
    path: str | None = None
    content: bytes | None = None
    cid: str | None = None
    content_type: str | None = None

    def __post_init__(self):
        if (self.path is None) == (self.content is None):
            raise ValueError("attachment needs exactly one of path or content")


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str
    attachments: tuple[EmailAttachment, ...] = ()


@dataclass(frozen=True)
class PaymentConfig:
    upi_id: str
    merchant_name: str


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: tuple[str, ...]


ValidationResult = Union[Valid[T], Invalid]
