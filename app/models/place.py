"""Data models for coffee shop search results and map annotations.

This module contains Pydantic models for places returned by the place search
service, the marker placed at the searched postal code, and the annotations
rendered on the map.
"""

import uuid
from typing import List, Literal, Optional, Union

from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.models.location import AddressComponents, Coordinate, format_address
from app.utils.geo import format_miles_away, meters_between

UNKNOWN_PLACE_NAME = "Unknown Coffee Shop"
USER_MARKER_LABEL = "YOU"


def _new_id() -> str:
    return str(uuid.uuid4())


class PlaceSearchResult(BaseModel):
    """A single item returned by the place search service.

    Attributes:
        name (Optional[str]): Display name, if the service knows one.
        address (AddressComponents): Structured address components.
        coordinate (Optional[Coordinate]): Location, if the service returned one.
    """

    name: Optional[str] = None
    address: AddressComponents = Field(default_factory=AddressComponents)
    coordinate: Optional[Coordinate] = None


class Place(BaseModel):
    """A found coffee shop, relative to the search center it was found around.

    Attributes:
        id (str): Stable identifier for the lifetime of the result set.
        name (str): Display name.
        address_components (AddressComponents): Structured address.
        coordinate (Optional[Coordinate]): Location of the place.
        search_center (Coordinate): Coordinate the search was centered on.
    """

    id: Annotated[str, Field(default_factory=_new_id)]
    name: Annotated[str, Field(UNKNOWN_PLACE_NAME, description="Display name")]
    address_components: AddressComponents = Field(default_factory=AddressComponents)
    coordinate: Optional[Coordinate] = None
    search_center: Coordinate

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_search_result(
        cls, result: PlaceSearchResult, search_center: Coordinate
    ) -> "Place":
        return cls(
            name=result.name or UNKNOWN_PLACE_NAME,
            address_components=result.address,
            coordinate=result.coordinate,
            search_center=search_center,
        )

    @computed_field
    @property
    def address(self) -> str:
        return format_address(self.address_components)

    @computed_field
    @property
    def distance(self) -> str:
        """Distance from the search center, or "" when the place has no coordinate."""
        if self.coordinate is None:
            return ""
        return format_miles_away(meters_between(self.coordinate, self.search_center))


class UserMarker(BaseModel):
    """Marker at the coordinate the user searched for."""

    id: Annotated[str, Field(default_factory=_new_id)]
    coordinate: Coordinate

    model_config = ConfigDict(frozen=True)


class UserAnnotation(BaseModel):
    kind: Literal["user"] = "user"
    id: str
    coordinate: Coordinate
    label: str = USER_MARKER_LABEL
    icon: str = "mappin.circle.fill"
    tint: str = "red"

    @classmethod
    def from_marker(cls, marker: UserMarker) -> "UserAnnotation":
        return cls(id=marker.id, coordinate=marker.coordinate)


class PlaceAnnotation(BaseModel):
    kind: Literal["place"] = "place"
    id: str
    place_id: str
    coordinate: Coordinate
    label: str
    icon: str = "cup.and.saucer.fill"
    tint: str = "brown"

    @classmethod
    def from_place(cls, place: Place) -> Optional["PlaceAnnotation"]:
        """Build the annotation for a place, or None if it cannot be pinned."""
        if place.coordinate is None:
            return None
        return cls(
            id=place.id,
            place_id=place.id,
            coordinate=place.coordinate,
            label=place.name,
        )


# Either kind of map pin; both expose coordinate and label.
MapAnnotation = Annotated[
    Union[UserAnnotation, PlaceAnnotation], Field(discriminator="kind")
]


def build_annotations(
    places: List[Place], user_marker: Optional[UserMarker]
) -> List[MapAnnotation]:
    """Place pins first, then the user marker when one exists."""
    annotations: List[MapAnnotation] = []
    for place in places:
        annotation = PlaceAnnotation.from_place(place)
        if annotation is not None:
            annotations.append(annotation)
    if user_marker is not None:
        annotations.append(UserAnnotation.from_marker(user_marker))
    return annotations
