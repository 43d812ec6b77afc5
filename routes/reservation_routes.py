from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.exceptions import RequestValidationError
from typing import List
from core.dependencies import get_current_admin, get_store
from core.exceptions import NotFoundError, ReservationStateError
from db.repository import Store
from models.admin import CurrentAdmin
from models.reservation import ReservationCreate, ReservationOut, parse_reservation_day
from services.reservation_service import (
    cancel_reservation,
    complete_reservation,
    create_reservation,
    list_reservations,
)
from services.restaurant_service import get_restaurant
from utils.logger import get_logger

logger = get_logger("Reservation_Route")
router = APIRouter(tags=["Reservations"])

@router.post("/reservations", response_model=ReservationOut, status_code=status.HTTP_201_CREATED)
async def api_create_reservation(payload: ReservationCreate, store: Store = Depends(get_store)):
    # party size limit lives on the restaurant, so it is checked here rather than in the schema
    try:
        restaurant = await get_restaurant(store, payload.restaurant_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown restaurant")
    if payload.party_size > restaurant["max_party_size"]:
        logger.info(f"Party of {payload.party_size} exceeds limit {restaurant['max_party_size']} for restaurant {restaurant['id']}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Party size must be between 1 and {restaurant['max_party_size']}",
        )
    return await create_reservation(store, payload)

@router.get("/restaurants/{restaurant_id}/reservations/{day}", response_model=List[ReservationOut])
async def api_list_reservations(restaurant_id: int = Path(...), day: str = Path(...), store: Store = Depends(get_store)):
    # a plain date or any timestamp on that day
    try:
        calendar_day = parse_reservation_day(day)
    except ValueError:
        raise RequestValidationError([{"loc": ("path", "day"), "msg": "Expected a date or timestamp", "type": "value_error"}])
    return await list_reservations(store, restaurant_id, calendar_day)

@router.post("/reservations/{reservation_id}/cancel", response_model=ReservationOut)
async def api_cancel_reservation(reservation_id: int, store: Store = Depends(get_store)):
    try:
        return await cancel_reservation(store, reservation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ReservationStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

@router.post("/reservations/{reservation_id}/complete", response_model=ReservationOut)
async def api_complete_reservation(
    reservation_id: int,
    store: Store = Depends(get_store),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    try:
        return await complete_reservation(store, reservation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ReservationStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
