import logging
from typing import Optional

from app.core.config import settings
from app.models.location import Coordinate, Span, Viewport
from app.models.place import Place
from app.models.search import SearchState
from app.services.location_service import (
    GeocodeFailure,
    LocationService,
    location_service,
)
from app.services.place_search_service import (
    PlaceSearchService,
    SearchFailure,
    place_search_service,
)


logger = logging.getLogger(__name__)

INVALID_ZIP_MESSAGE = "Invalid zip code. Please try again."
NO_RESULTS_MESSAGE = "No coffee shops found in this area."


class SearchController:
    """
    Turns a user-entered postal code into map state: geocode, search for
    coffee shops around the result, and publish places and viewport on the
    shared SearchState.

    Geocodes and searches are numbered separately. A geocode response is
    discarded once a newer postal code has been submitted, and a search
    response once a newer search has started. A postal code that fails to
    geocode never cancels the search already in flight.
    """

    def __init__(
        self,
        geo_lookup: Optional[LocationService] = None,
        place_search: Optional[PlaceSearchService] = None,
        state: Optional[SearchState] = None,
    ):
        self.geo_lookup = geo_lookup or location_service
        self.place_search = place_search or place_search_service
        self.span = Span(
            latitude_delta=settings.VIEWPORT_SPAN_DEGREES,
            longitude_delta=settings.VIEWPORT_SPAN_DEGREES,
        )
        self.state = state or SearchState.initial(
            Coordinate(
                latitude=settings.DEFAULT_LATITUDE,
                longitude=settings.DEFAULT_LONGITUDE,
            ),
            self.span,
        )
        self._geocode_generation = 0
        self._search_generation = 0
        self._pending_search: Optional[int] = None

    def _finish_stale_search(self) -> None:
        # a newer search clears the flag itself when it finishes
        if self._pending_search is None:
            self.state.end_search()

    async def submit_postal_code(self, text: str) -> SearchState:
        """
        Geocode a postal code and search for coffee shops around it.

        Args:
            text: Postal code as entered; not validated or normalized
        Returns:
            SearchState: The updated shared state.
        """
        self._geocode_generation += 1
        generation = self._geocode_generation
        self.state.set_postal_code(text)
        logger.info(f"Postal code search:[zip_code:{text}][generation:{generation}]")

        try:
            center = await self.geo_lookup.resolve(text)
        except GeocodeFailure as e:
            if generation != self._geocode_generation:
                logger.info(f"Discarding stale geocode failure for '{text}'")
                return self.state
            logger.warning(f"Geocoding failed for '{text}': {e}")
            self.state.show_error(INVALID_ZIP_MESSAGE)
            return self.state

        if generation != self._geocode_generation:
            logger.info(f"Discarding stale geocode result for '{text}'")
            return self.state

        self.state.place_user_marker(center)
        await self.run_search(center)
        return self.state

    async def run_search(self, center: Coordinate) -> SearchState:
        """
        Search for coffee shops around an already resolved coordinate.

        Args:
            center: Center of the search region
        Returns:
            SearchState: The updated shared state.
        """
        self._search_generation += 1
        generation = self._search_generation
        self._pending_search = generation
        self.state.begin_search()

        try:
            results = await self.place_search.search(
                query=settings.SEARCH_QUERY,
                center=center,
                region_meters=settings.SEARCH_REGION_METERS,
            )
        except SearchFailure as e:
            if generation != self._search_generation:
                logger.info("Discarding stale search failure")
                self._finish_stale_search()
                return self.state
            self._pending_search = None
            logger.error(f"Coffee shop search failed: {e.reason}")
            self.state.end_search()
            self.state.show_error(f"Search failed: {e.reason}")
            return self.state

        if generation != self._search_generation:
            logger.info(f"Discarding {len(results)} stale search results")
            self._finish_stale_search()
            return self.state

        self._pending_search = None
        if not results:
            self.state.end_search()
            self.state.show_error(NO_RESULTS_MESSAGE)
            return self.state

        places = [Place.from_search_result(result, center) for result in results]
        self.state.apply_results(places, Viewport(center=center, span=self.span))
        logger.info(f"Showing {len(places)} coffee shops")
        return self.state

    def dismiss_error(self) -> SearchState:
        self.state.dismiss_error()
        return self.state


search_controller = SearchController()
