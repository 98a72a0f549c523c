"""Data models for geographic locations.

This module contains Pydantic models that describe coordinates, map
viewports and structured postal addresses.
"""

from typing import Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict


ADDRESS_UNAVAILABLE = "Address unavailable"


class Coordinate(BaseModel):
    """A point on the earth's surface in decimal degrees.

    Attributes:
        latitude (float): Latitude in degrees, -90 to 90.
        longitude (float): Longitude in degrees, -180 to 180.
    """

    latitude: Annotated[float, Field(..., ge=-90, le=90, description="Latitude coord")]
    longitude: Annotated[
        float, Field(..., ge=-180, le=180, description="Longitude coord")
    ]

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple:
        """Return the coordinate as a (latitude, longitude) tuple for geopy."""
        return (self.latitude, self.longitude)


class Span(BaseModel):
    """Angular extent of the visible map region."""

    latitude_delta: Annotated[float, Field(..., gt=0, description="Height in degrees")]
    longitude_delta: Annotated[float, Field(..., gt=0, description="Width in degrees")]

    model_config = ConfigDict(frozen=True)


class Viewport(BaseModel):
    """Visible map region: a center coordinate and an angular span."""

    center: Coordinate
    span: Span

    model_config = ConfigDict(frozen=True)


class AddressComponents(BaseModel):
    """Structured postal address of a place.

    Attributes:
        street (Optional[str]): Street or road name.
        city (Optional[str]): City or locality name.
        region (Optional[str]): State, province or other administrative area.
        postal_code (Optional[str]): Postal or ZIP code.
    """

    street: Annotated[Optional[str], Field(None, description="Street or road name")]
    city: Annotated[Optional[str], Field(None, description="City name")]
    region: Annotated[
        Optional[str], Field(None, description="State or administrative area")
    ]
    postal_code: Annotated[Optional[str], Field(None, description="Postal or ZIP code")]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def format_address(components: Optional[AddressComponents]) -> str:
    """Join the present address components into a single display line.

    Args:
        components: Structured address, possibly empty

    Returns:
        str: "street, city, region, postal code" with missing parts skipped,
            or "Address unavailable" when nothing is present
    """
    if components is None:
        return ADDRESS_UNAVAILABLE

    parts = [
        components.street,
        components.city,
        components.region,
        components.postal_code,
    ]
    address = ", ".join(part.strip() for part in parts if part and part.strip())
    return address if address else ADDRESS_UNAVAILABLE
