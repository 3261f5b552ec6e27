from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SuccessOut(BaseModel):
    success: Literal[True] = True
    message: str


class ErrorOut(BaseModel):
    success: Literal[False] = False
    message: str


class ValidationErrorOut(ErrorOut):
    message: str = "Validation Error"
    errors: list[str] = Field(default_factory=list)


class PaymentConfigOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    upi_id: str = Field(..., alias="upiId")
    merchant_name: str = Field(..., alias="merchantName")


INTERNAL_ERROR = ErrorOut(message="Internal Server Error")
