"""Data models for handing directions off to an external maps application."""

from enum import Enum

from pydantic import BaseModel

from app.models.location import Coordinate


class TravelMode(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    TRANSIT = "transit"
    BICYCLING = "bicycling"


class Waypoint(BaseModel):
    """A labeled coordinate on a route.

    Attributes:
        coordinate (Coordinate): Location of the waypoint.
        label (str): Name shown for the waypoint in the maps application.
    """

    coordinate: Coordinate
    label: str


class DirectionsHandoff(BaseModel):
    """Link that opens turn-by-turn directions in an external maps application.

    Attributes:
        url (str): Directions link with origin, destination and travel mode.
        start (Waypoint): Route start and its label, e.g. "Your Location".
        end (Waypoint): Route end, labeled with the place name.
        mode (TravelMode): Requested travel mode.
        shows_traffic (bool): Whether the client should enable the traffic layer.
    """

    url: str
    start: Waypoint
    end: Waypoint
    mode: TravelMode
    shows_traffic: bool
