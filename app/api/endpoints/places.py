"""API endpoints for found coffee shops and directions to them."""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status, Path

from app.models.directions import DirectionsHandoff
from app.models.place import Place
from app.models.search import PlaceDetailResponse
from app.services.directions_service import DirectionsUnavailable, directions_service
from app.services.search_controller import search_controller
from app.services.view_service import build_place_detail

logger = logging.getLogger(__name__)

router = APIRouter()


def get_place_or_404(place_id: str) -> Place:
    place = search_controller.state.find_place(place_id)
    if place is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Place {place_id} not found",
        )
    return place


@router.get(
    "",
    response_model=List[PlaceDetailResponse],
    status_code=status.HTTP_200_OK,
    summary="List the coffee shops from the last search",
)
async def list_places() -> List[PlaceDetailResponse]:
    return [build_place_detail(place) for place in search_controller.state.places]


@router.get(
    "/{place_id}",
    response_model=PlaceDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get the details of a coffee shop",
    description="Name, address and distance from the searched postal code",
)
async def get_place(
    place_id: str = Path(..., description="Identifier of a place from the last search"),
) -> PlaceDetailResponse:
    return build_place_detail(get_place_or_404(place_id))


@router.post(
    "/{place_id}/directions",
    response_model=DirectionsHandoff,
    status_code=status.HTTP_200_OK,
    summary="Get driving directions to a coffee shop",
    description="Hand off driving directions from the searched location to an external maps application",
)
async def get_directions(
    place_id: str = Path(..., description="Identifier of a place from the last search"),
) -> DirectionsHandoff:
    """Get directions to a place.

    Args:
        place_id: Identifier of a place from the last search

    Returns:
        The maps link and waypoints for the external maps application

    Raises:
        HTTPException: 404 for an unknown place, 422 if it has no location
    """
    place = get_place_or_404(place_id)
    try:
        logger.info(f"Directions:[place_id:{place_id}]")
        return directions_service.open_directions(
            place, search_controller.state.search_center
        )
    except DirectionsUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
