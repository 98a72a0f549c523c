from typing import Tuple

from geopy.distance import distance, geodesic

from app.models.location import Coordinate

METERS_PER_MILE = 1609.34


def meters_between(start: Coordinate, end: Coordinate) -> float:
    """Geodesic distance between two coordinates in meters."""
    return geodesic(start.as_tuple(), end.as_tuple()).meters


def format_miles_away(meters: float) -> str:
    """Format a distance in meters as e.g. '2.4 miles away'."""
    miles = meters / METERS_PER_MILE
    return f"{miles:.1f} miles away"


def bounding_box(center: Coordinate, side_meters: float) -> Tuple[float, float, float, float]:
    """Square region of side_meters centered on center.

    Args:
        center: Center of the region
        side_meters: Length of each side in meters

    Returns:
        Tuple[float, float, float, float]: (south, west, north, east) in degrees
    """
    half = distance(meters=side_meters / 2)
    origin = center.as_tuple()
    north = half.destination(origin, bearing=0).latitude
    east = half.destination(origin, bearing=90).longitude
    south = half.destination(origin, bearing=180).latitude
    west = half.destination(origin, bearing=270).longitude
    return south, west, north, east
