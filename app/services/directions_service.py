"""Directions hand-off to an external maps application.

The application never renders a route itself. It builds a start and end
waypoint and passes them to a launcher, which produces the link that opens
turn-by-turn directions elsewhere.
"""

import logging
from typing import Optional

import httpx

from app.core.config import settings
from app.models.directions import DirectionsHandoff, TravelMode, Waypoint
from app.models.location import Coordinate
from app.models.place import Place

logger = logging.getLogger(__name__)

START_WAYPOINT_LABEL = "Your Location"


class DirectionsUnavailable(Exception):
    """Raised when directions cannot be built for a place."""
    pass


def _format_point(coordinate: Coordinate) -> str:
    return f"{coordinate.latitude},{coordinate.longitude}"


class MapsLinkLauncher:
    """Launches directions by building a maps URL for the client to open."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url or settings.DIRECTIONS_BASE_URL

    def launch(
        self,
        start: Waypoint,
        end: Waypoint,
        mode: TravelMode = TravelMode.DRIVING,
        show_traffic: bool = True,
    ) -> DirectionsHandoff:
        # the dir action has no traffic or label parameters; the client
        # applies both from the hand-off
        params = {
            "api": "1",
            "origin": _format_point(start.coordinate),
            "destination": _format_point(end.coordinate),
            "travelmode": mode.value,
            "dir_action": "navigate",
        }
        url = httpx.URL(self.base_url, params=params)
        logger.info(f"Launching {mode.value} directions to '{end.label}'")
        return DirectionsHandoff(
            url=str(url),
            start=start,
            end=end,
            mode=mode,
            shows_traffic=show_traffic,
        )


class DirectionsService:
    """Builds the waypoints for a selected place and hands them to a launcher."""

    def __init__(self, launcher: Optional[MapsLinkLauncher] = None):
        self.launcher = launcher or MapsLinkLauncher()

    def open_directions(self, place: Place, center: Coordinate) -> DirectionsHandoff:
        """Hand off driving directions from the search center to a place.

        Args:
            place: The selected place
            center: Current search center, used as the start of the route

        Returns:
            DirectionsHandoff produced by the launcher

        Raises:
            DirectionsUnavailable: If the place has no coordinate
        """
        if place.coordinate is None:
            raise DirectionsUnavailable(f"No location available for '{place.name}'")

        start = Waypoint(coordinate=center, label=START_WAYPOINT_LABEL)
        end = Waypoint(coordinate=place.coordinate, label=place.name)
        return self.launcher.launch(
            start, end, mode=TravelMode.DRIVING, show_traffic=True
        )


directions_service = DirectionsService()
