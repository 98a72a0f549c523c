"""API endpoints for searching coffee shops by postal code.
"""
import logging

from fastapi import APIRouter, HTTPException, status

from app.models.search import MapViewResponse, ZipCodeSearchRequest
from app.services.search_controller import search_controller
from app.services.view_service import build_map_view

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=MapViewResponse,
    status_code=status.HTTP_200_OK,
    summary="Search coffee shops near a postal code",
    description="Geocode a postal code and search for coffee shops within about 10 miles of it",
)
async def search_by_zip_code(request: ZipCodeSearchRequest) -> MapViewResponse:
    """Search by postal code.

    Geocoding and search failures are not HTTP errors: they are reported in
    the alert of the returned map view.

    Args:
        request: Body holding the postal code as entered

    Returns:
        The map view after the search completed

    Raises:
        HTTPException: If there is an unexpected error processing the request
    """
    try:
        logger.info(f"Search:[zip_code:{request.zip_code}]")
        state = await search_controller.submit_postal_code(request.zip_code)
        return build_map_view(state)

    except Exception as e:
        logger.error(f"Unexpected error searching '{request.zip_code}': {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error searching for coffee shops: {str(e)}",
        )


@router.get(
    "/map",
    response_model=MapViewResponse,
    status_code=status.HTTP_200_OK,
    summary="Get the current map view",
)
async def get_map_view() -> MapViewResponse:
    return build_map_view(search_controller.state)


@router.post(
    "/alert/dismiss",
    response_model=MapViewResponse,
    status_code=status.HTTP_200_OK,
    summary="Acknowledge the error alert",
)
async def dismiss_alert() -> MapViewResponse:
    state = search_controller.dismiss_error()
    return build_map_view(state)
