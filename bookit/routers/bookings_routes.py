# bookit/routers/bookings_routes.py

from fastapi import APIRouter, Depends

from bookit.auth import get_current_user
from bookit.ids import generate_id
from bookit.schemas import Ack, BookingRequest, CreatedBooking, UserAck

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


@router.get("", response_model=UserAck)
def list_bookings(current_user: dict = Depends(get_current_user)):
    return {"message": "Fetch bookings from local store", "user_id": current_user["id"]}


# No slot check here: availability is decided by the client
@router.post("", response_model=CreatedBooking)
def create_booking(
    body: BookingRequest,
    current_user: dict = Depends(get_current_user),
):
    return {
        "id": generate_id("bkg"),
        "message": "Booking created",
        "user_id": current_user["id"],
    }


@router.delete("/{booking_id}", response_model=Ack)
def cancel_booking(
    booking_id: str,
    current_user: dict = Depends(get_current_user),
):
    return {"message": "Booking cancelled", "id": booking_id}
