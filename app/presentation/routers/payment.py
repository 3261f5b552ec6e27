from typing import Annotated

from fastapi import APIRouter, Depends

from app.domain.entities import PaymentConfig
from app.presentation.dependencies import get_payment_config
from app.schemas.responses import PaymentConfigOut

router = APIRouter(tags=["Payment"])


@router.get("/payment-config", response_model=PaymentConfigOut)
async def get_payment_config_route(
    config: Annotated[PaymentConfig, Depends(get_payment_config)],
) -> PaymentConfigOut:
    return PaymentConfigOut(upi_id=config.upi_id, merchant_name=config.merchant_name)
