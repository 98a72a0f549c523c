import asyncio
import logging
from typing import Optional

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from app.core.config import settings
from app.models.location import Coordinate


logger = logging.getLogger(__name__)


class GeocodeFailure(Exception):
    """Raised when a postal code does not resolve to a coordinate."""
    pass


class LocationService:
    """Service for resolving postal codes using the Nominatim geocoder.

    This class provides an asynchronous method to turn free-text postal codes
    into geographic coordinates.
    """

    def __init__(self, locator: Optional[Nominatim] = None):
        """Initialize geocoder."""
        self.locator = locator or Nominatim(
            user_agent=settings.NOMINATIM_USER_AGENT,
            domain=settings.NOMINATIM_DOMAIN,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )

    async def resolve(self, text: str) -> Coordinate:
        """Resolve a postal code to the coordinate of its first candidate

        Args:
            text (str): Postal code exactly as the user entered it

        Returns:
            Coordinate of the first geocoding candidate

        Raises:
            GeocodeFailure: If the geocoder errors or returns no candidates
        """
        try:
            # geopy is blocking; keep the event loop free while it runs
            candidates = await asyncio.to_thread(
                self.locator.geocode,
                text,
                exactly_one=False,
                country_codes=settings.GEOCODER_COUNTRY_CODES,
            )
        except GeopyError as e:
            logger.error(f"Error geocoding postal code '{text}': {str(e)}")
            raise GeocodeFailure(str(e)) from e

        if not candidates:
            logger.warning(f"No geocoding candidates for postal code '{text}'")
            raise GeocodeFailure(f"No results for '{text}'")

        first = candidates[0]
        logger.info(
            f"Geocoded '{text}' to lat: {first.latitude}, lon: {first.longitude}"
        )
        return Coordinate(latitude=first.latitude, longitude=first.longitude)


location_service = LocationService()
