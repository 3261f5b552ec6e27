from fastapi import APIRouter

from app.presentation.routers.booking import router as booking_router
from app.presentation.routers.contact import router as contact_router
from app.presentation.routers.payment import router as payment_router

api = APIRouter()

# Add all /api routers here
routers = (booking_router, contact_router, payment_router)
for router in routers:
    api.include_router(router, prefix="/api")
