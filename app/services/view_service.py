from app.models.place import Place, build_annotations
from app.models.search import (
    Alert,
    MapViewResponse,
    PlaceDetailResponse,
    SearchState,
)

PROGRESS_MESSAGE = "Searching for coffee shops..."


def build_map_view(state: SearchState) -> MapViewResponse:
    """Render the map screen for the current search state.

    Args:
        state: Current search state

    Returns:
        MapViewResponse with header, viewport, annotations and any pending alert
    """
    if state.postal_code:
        header = f"Zip Code: {state.postal_code}"
        action_label = "Change"
    else:
        header = "Enter a zip code to start"
        action_label = "Search"

    alert = None
    if state.showing_error and state.error_message:
        alert = Alert(message=state.error_message)

    return MapViewResponse(
        header=header,
        search_action_label=action_label,
        progress_message=PROGRESS_MESSAGE if state.is_searching else None,
        viewport=state.viewport,
        annotations=build_annotations(state.places, state.user_marker),
        alert=alert,
    )


def build_place_detail(place: Place) -> PlaceDetailResponse:
    """Render the detail sheet for a selected place."""
    return PlaceDetailResponse(
        id=place.id,
        name=place.name,
        address=place.address,
        distance=place.distance or None,
        coordinate=place.coordinate,
    )
