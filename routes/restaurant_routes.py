# routes/restaurant_routes.py
from fastapi import APIRouter, Depends, HTTPException, status, Query, Body, Path
from typing import List, Optional
from core.dependencies import get_current_admin, get_store
from core.exceptions import NotFoundError
from db.repository import Store
from models.admin import CurrentAdmin
from models.restaurant import RestaurantCreate, RestaurantOut, RestaurantUpdate
from services.restaurant_service import (
    create_restaurant,
    delete_restaurant,
    generate_time_slots,
    get_restaurant,
    list_restaurants,
    search_restaurants,
    update_restaurant,
)
from utils.logger import get_logger

logger = get_logger("Restaurant_Route")
router = APIRouter(prefix="/restaurants", tags=["Restaurants"])

# Public: list restaurants, optionally filtered by ?q=
@router.get("", response_model=List[RestaurantOut])
async def api_list_restaurants(q: Optional[str] = Query(None), store: Store = Depends(get_store)):
    if q is not None:
        return await search_restaurants(store, q)
    return await list_restaurants(store)

@router.get("/search/{query}", response_model=List[RestaurantOut])
async def api_search_restaurants(query: str = Path(...), store: Store = Depends(get_store)):
    return await search_restaurants(store, query)

# Public: get single restaurant
@router.get("/{restaurant_id}", response_model=RestaurantOut)
async def api_get_restaurant(restaurant_id: int = Path(...), store: Store = Depends(get_store)):
    try:
        return await get_restaurant(store, restaurant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.get("/{restaurant_id}/time-slots", response_model=List[str])
async def api_time_slots(restaurant_id: int = Path(...), store: Store = Depends(get_store)):
    try:
        restaurant = await get_restaurant(store, restaurant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return generate_time_slots(restaurant["time_slot_interval"])

# Admin: create restaurant
@router.post("", response_model=RestaurantOut, status_code=status.HTTP_201_CREATED)
async def api_create_restaurant(
    payload: RestaurantCreate = Body(...),
    store: Store = Depends(get_store),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    return await create_restaurant(store, payload, actor=current_admin.username)

# Admin: full replace of a restaurant record
@router.patch("/{restaurant_id}", response_model=RestaurantOut)
async def api_update_restaurant(
    restaurant_id: int,
    payload: RestaurantUpdate = Body(...),
    store: Store = Depends(get_store),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    try:
        return await update_restaurant(store, restaurant_id, payload, actor=current_admin.username)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.delete("/{restaurant_id}")
async def api_delete_restaurant(
    restaurant_id: int,
    store: Store = Depends(get_store),
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    try:
        return await delete_restaurant(store, restaurant_id, actor=current_admin.username)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
