"""Data models for the search API.

This module contains the process-wide search state and the Pydantic models
that define the request and response data for the search and places API.
"""

from typing import List, Optional

from typing_extensions import Annotated
from pydantic import BaseModel, Field

from app.models.location import Coordinate, Span, Viewport
from app.models.place import MapAnnotation, Place, UserMarker


class SearchState(BaseModel):
    """Current state of the single CafeMap screen.

    Only SearchController calls the update methods below; every other reader
    treats the state as read-only.

    Attributes:
        postal_code (str): Raw text of the last submitted postal code.
        places (List[Place]): Results of the last successful search.
        user_marker (Optional[UserMarker]): Marker at the geocoded postal code.
        search_center (Coordinate): Coordinate the current places are relative to.
        is_searching (bool): True while a place search is in flight.
        error_message (Optional[str]): Last error shown to the user.
        showing_error (bool): True until the user acknowledges the alert.
        viewport (Viewport): Visible map region.
    """

    postal_code: str = ""
    places: List[Place] = Field(default_factory=list)
    user_marker: Optional[UserMarker] = None
    search_center: Coordinate
    is_searching: bool = False
    error_message: Optional[str] = None
    showing_error: bool = False
    viewport: Viewport

    @classmethod
    def initial(cls, center: Coordinate, span: Span) -> "SearchState":
        return cls(search_center=center, viewport=Viewport(center=center, span=span))

    def set_postal_code(self, text: str) -> None:
        self.postal_code = text

    def place_user_marker(self, coordinate: Coordinate) -> None:
        self.search_center = coordinate
        self.user_marker = UserMarker(coordinate=coordinate)

    def begin_search(self) -> None:
        self.is_searching = True
        self.places = []

    def apply_results(self, places: List[Place], viewport: Viewport) -> None:
        self.places = places
        self.viewport = viewport
        self.is_searching = False

    def end_search(self) -> None:
        self.is_searching = False

    def show_error(self, message: str) -> None:
        self.error_message = message
        self.showing_error = True

    def dismiss_error(self) -> None:
        self.showing_error = False

    def find_place(self, place_id: str) -> Optional[Place]:
        for place in self.places:
            if place.id == place_id:
                return place
        return None


class ZipCodeSearchRequest(BaseModel):
    """Request body for a postal code search."""

    zip_code: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="US zip code or Canadian postal code, not otherwise validated",
        ),
    ]


class Alert(BaseModel):
    """Blocking error alert with a single acknowledgement action."""

    title: str = "Error"
    message: str
    dismiss_label: str = "OK"


class MapViewResponse(BaseModel):
    """Everything the client needs to render the map screen.

    Attributes:
        header (str): Text describing the current postal code.
        search_action_label (str): Label of the button that opens postal code entry.
        progress_message (Optional[str]): Shown while a search is in flight.
        viewport (Viewport): Visible map region.
        annotations (List[MapAnnotation]): Place pins and the "YOU" marker.
        alert (Optional[Alert]): Error alert awaiting acknowledgement.
    """

    header: str
    search_action_label: str
    progress_message: Optional[str] = None
    viewport: Viewport
    annotations: List[MapAnnotation] = Field(default_factory=list)
    alert: Optional[Alert] = None


class PlaceDetailResponse(BaseModel):
    """Detail sheet for one selected place."""

    id: str
    name: str
    address: str
    distance: Annotated[
        Optional[str], Field(None, description="Omitted when there is no distance to display")
    ]
    coordinate: Optional[Coordinate] = None
    directions_label: str = "Get Directions"
