"""Configuration settings for the CafeMap API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_V1_STR: API version path prefix
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        NOMINATIM_USER_AGENT: User agent sent to the Nominatim geocoder
        OVERPASS_URL: Overpass interpreter endpoint used for place search
        SEARCH_QUERY: Free-text query for nearby places
        SEARCH_REGION_METERS: Side length of the square search region
        DIRECTIONS_BASE_URL: External maps directions link
    """
    def __init__(self):
        self.API_V1_STR = "/api/v1"
        self.PROJECT_NAME = "CafeMap API"
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Geocoder Settings
        self.NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "cafemap")
        self.NOMINATIM_DOMAIN = os.getenv("NOMINATIM_DOMAIN", "nominatim.openstreetmap.org")
        # US zip codes and Canadian postal codes
        self.GEOCODER_COUNTRY_CODES = os.getenv("GEOCODER_COUNTRY_CODES", "us,ca")

        # Place Search Settings
        self.OVERPASS_URL = os.getenv(
            "OVERPASS_URL", "https://overpass-api.de/api/interpreter"
        )
        self.HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 30))
        self.SEARCH_QUERY = os.getenv("SEARCH_QUERY", "coffee")
        self.SEARCH_REGION_METERS = float(os.getenv("SEARCH_REGION_METERS", 16093.4))  # 10 miles

        # Map Settings
        self.VIEWPORT_SPAN_DEGREES = float(os.getenv("VIEWPORT_SPAN_DEGREES", 0.05))
        self.DEFAULT_LATITUDE = float(os.getenv("DEFAULT_LATITUDE", 37.7749))
        self.DEFAULT_LONGITUDE = float(os.getenv("DEFAULT_LONGITUDE", -122.4194))

        # Directions Settings
        self.DIRECTIONS_BASE_URL = os.getenv(
            "DIRECTIONS_BASE_URL", "https://www.google.com/maps/dir/"
        )


settings = Settings()
