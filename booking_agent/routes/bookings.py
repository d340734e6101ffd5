from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from booking_agent.db.session import get_db
from booking_agent.schemas.booking import BookingListItem
from booking_agent.schemas.common import APIResponse
from booking_agent.services.booking_service import list_bookings

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/", response_model=APIResponse[list[BookingListItem]])
def get_bookings(business_id: int, db: Session = Depends(get_db)):
    bookings = list_bookings(db, business_id)
    return APIResponse.ok([BookingListItem.model_validate(booking) for booking in bookings])
