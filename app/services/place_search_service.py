"""Place search service backed by the OpenStreetMap Overpass API.

This module finds points of interest matching a text query inside a square
region around a coordinate.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings
from app.models.location import AddressComponents, Coordinate
from app.models.place import PlaceSearchResult
from app.utils.geo import bounding_box

logger = logging.getLogger(__name__)


class SearchFailure(Exception):
    """Raised when the place search service cannot answer a query."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def build_overpass_query(query: str, bbox: tuple, timeout: int = 25) -> str:
    """Build an Overpass QL query for cafes or places named like query.

    Args:
        query: Free-text search term, matched case-insensitively against names
        bbox: (south, west, north, east) bounding box in degrees
        timeout: Server-side timeout in seconds

    Returns:
        str: Overpass QL source
    """
    south, west, north, east = bbox
    area = f"({south:.7f},{west:.7f},{north:.7f},{east:.7f})"
    term = query.replace("\\", "\\\\").replace('"', '\\"')
    return (
        f"[out:json][timeout:{timeout}];\n"
        f"(\n"
        f'  nwr["amenity"="cafe"]{area};\n'
        f'  nwr["name"~"{term}",i]{area};\n'
        f");\n"
        f"out center;\n"
    )


def parse_element(element: Dict[str, Any]) -> PlaceSearchResult:
    """Convert one Overpass element into a PlaceSearchResult."""
    tags = element.get("tags") or {}

    lat = element.get("lat")
    lon = element.get("lon")
    if lat is None or lon is None:
        center = element.get("center") or {}
        lat, lon = center.get("lat"), center.get("lon")

    coordinate: Optional[Coordinate] = None
    if lat is not None and lon is not None:
        coordinate = Coordinate(latitude=float(lat), longitude=float(lon))

    return PlaceSearchResult(
        name=tags.get("name"),
        address=AddressComponents(
            street=tags.get("addr:street"),
            city=tags.get("addr:city"),
            region=tags.get("addr:state") or tags.get("addr:province"),
            postal_code=tags.get("addr:postcode"),
        ),
        coordinate=coordinate,
    )


class PlaceSearchService:
    """Searches for points of interest around a coordinate."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url or settings.OVERPASS_URL
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS
        self.headers = {"User-Agent": settings.NOMINATIM_USER_AGENT}

    async def search(
        self,
        query: str,
        center: Coordinate,
        region_meters: float,
    ) -> List[PlaceSearchResult]:
        """Find places matching query inside a square region around center.

        Args:
            query: Free-text query, e.g. "coffee"
            center: Center of the search region
            region_meters: Side length of the square search region in meters

        Returns:
            List of matching places; empty if the service found nothing

        Raises:
            SearchFailure: If the request fails or the response cannot be read
        """
        bbox = bounding_box(center, region_meters)
        overpass_query = build_overpass_query(query, bbox)
        logger.info(
            f"Place search:[query:{query}][lat:{center.latitude}][lon:{center.longitude}][region_m:{region_meters}]"
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.base_url,
                    data={"data": overpass_query},
                    headers=self.headers,
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Place search returned status {e.response.status_code}")
            raise SearchFailure(
                f"The search service responded with status {e.response.status_code}."
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error during place search: {str(e)}")
            raise SearchFailure(f"Could not reach the search service: {str(e)}") from e
        except ValueError as e:
            logger.error(f"Invalid place search response: {str(e)}")
            raise SearchFailure("The search service returned an invalid response.") from e

        if not isinstance(payload, dict):
            raise SearchFailure("The search service returned an invalid response.")

        elements = payload.get("elements") or []
        results = [parse_element(element) for element in elements]
        logger.info(f"Found {len(results)} places for query '{query}'")
        return results


place_search_service = PlaceSearchService()
