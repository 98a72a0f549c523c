import asyncio

import pytest

from app.core.config import settings
from app.models.location import Span, Viewport
from app.services.location_service import GeocodeFailure
from app.services.place_search_service import SearchFailure
from app.services.search_controller import INVALID_ZIP_MESSAGE, NO_RESULTS_MESSAGE
from app.tests.constants.search import SearchTestConstants


ZIP_CODE = SearchTestConstants.MOCK_ZIP_CODE.value
OTHER_ZIP_CODE = SearchTestConstants.MOCK_OTHER_ZIP_CODE.value


@pytest.mark.asyncio
class TestSubmitPostalCode:
    async def test_success_places_marker_and_results(
        self, controller, mock_geo_lookup, mock_place_search, mock_center, mock_search_results
    ):
        """A resolved zip code produces a marker and places around the same center."""
        mock_geo_lookup.resolve.return_value = mock_center
        mock_place_search.search.return_value = mock_search_results

        state = await controller.submit_postal_code(ZIP_CODE)

        assert state.postal_code == ZIP_CODE
        assert state.user_marker.coordinate == mock_center
        assert state.search_center == mock_center
        assert len(state.places) == 5
        assert all(place.search_center == mock_center for place in state.places)
        assert state.is_searching is False
        assert state.error_message is None

        mock_geo_lookup.resolve.assert_called_once_with(ZIP_CODE)
        mock_place_search.search.assert_called_once_with(
            query="coffee",
            center=mock_center,
            region_meters=16093.4,
        )

    async def test_success_recenters_viewport(
        self, controller, mock_geo_lookup, mock_place_search, mock_center, mock_search_results
    ):
        mock_geo_lookup.resolve.return_value = mock_center
        mock_place_search.search.return_value = mock_search_results

        state = await controller.submit_postal_code(ZIP_CODE)

        assert state.viewport == Viewport(
            center=mock_center,
            span=Span(latitude_delta=0.05, longitude_delta=0.05),
        )

    async def test_raw_text_is_not_normalized(
        self, controller, mock_geo_lookup, mock_place_search, mock_center, mock_search_results
    ):
        mock_geo_lookup.resolve.return_value = mock_center
        mock_place_search.search.return_value = mock_search_results

        state = await controller.submit_postal_code(" k1a 0b1 ")

        assert state.postal_code == " k1a 0b1 "
        mock_geo_lookup.resolve.assert_called_once_with(" k1a 0b1 ")

    async def test_geocode_failure_keeps_previous_results(
        self, controller, mock_geo_lookup, mock_place_search, mock_center, mock_search_results
    ):
        """A zip code that does not resolve leaves the previous marker and places alone."""
        mock_geo_lookup.resolve.return_value = mock_center
        mock_place_search.search.return_value = mock_search_results
        await controller.submit_postal_code(ZIP_CODE)
        previous_places = list(controller.state.places)
        previous_marker = controller.state.user_marker

        mock_geo_lookup.resolve.side_effect = GeocodeFailure("No results for '00000'")
        state = await controller.submit_postal_code("00000")

        assert state.error_message == INVALID_ZIP_MESSAGE
        assert state.showing_error is True
        assert state.places == previous_places
        assert state.user_marker == previous_marker
        assert mock_place_search.search.call_count == 1

    async def test_geocode_failure_without_previous_search(
        self, controller, mock_geo_lookup, mock_place_search
    ):
        mock_geo_lookup.resolve.side_effect = GeocodeFailure("Service timed out")

        state = await controller.submit_postal_code("not a zip")

        assert state.error_message == "Invalid zip code. Please try again."
        assert state.user_marker is None
        assert state.places == []
        mock_place_search.search.assert_not_called()


@pytest.mark.asyncio
class TestRunSearch:
    async def test_search_failure_sets_message(
        self, controller, mock_place_search, mock_center
    ):
        mock_place_search.search.side_effect = SearchFailure(
            "Could not reach the search service: timed out"
        )

        state = await controller.run_search(mock_center)

        assert state.error_message == "Search failed: Could not reach the search service: timed out"
        assert state.showing_error is True
        assert state.places == []
        assert state.is_searching is False

    async def test_empty_results_sets_message(
        self, controller, mock_place_search, mock_center
    ):
        mock_place_search.search.return_value = []

        state = await controller.run_search(mock_center)

        assert state.error_message == NO_RESULTS_MESSAGE
        assert state.places == []
        assert state.is_searching is False

    async def test_failure_does_not_move_viewport(
        self, controller, mock_place_search, mock_center
    ):
        initial_viewport = controller.state.viewport
        mock_place_search.search.return_value = []

        state = await controller.run_search(mock_center)

        assert state.viewport == initial_viewport
        assert state.viewport.center.latitude == settings.DEFAULT_LATITUDE

    async def test_new_search_replaces_places(
        self,
        controller,
        mock_place_search,
        mock_center,
        mock_other_center,
        mock_search_results,
    ):
        mock_place_search.search.return_value = mock_search_results
        await controller.run_search(mock_center)
        first_ids = {place.id for place in controller.state.places}

        mock_place_search.search.return_value = mock_search_results[:2]
        state = await controller.run_search(mock_other_center)

        assert len(state.places) == 2
        assert all(place.search_center == mock_other_center for place in state.places)
        assert not first_ids & {place.id for place in state.places}

    async def test_in_flight_flag_and_cleared_places_during_search(
        self, controller, mock_place_search, mock_center, mock_search_results
    ):
        mock_place_search.search.return_value = mock_search_results
        await controller.run_search(mock_center)
        observed = {}

        async def search(**kwargs):
            observed["is_searching"] = controller.state.is_searching
            observed["places"] = list(controller.state.places)
            return mock_search_results

        mock_place_search.search.side_effect = search
        await controller.run_search(mock_center)

        assert observed == {"is_searching": True, "places": []}
        assert controller.state.is_searching is False


@pytest.mark.asyncio
class TestSupersededRequests:
    async def test_stale_geocode_result_is_discarded(
        self,
        controller,
        mock_geo_lookup,
        mock_place_search,
        mock_center,
        mock_other_center,
        mock_search_results,
    ):
        """A slow geocode for an older zip code cannot overwrite a newer search."""
        release_first = asyncio.Event()

        async def resolve(text):
            if text == ZIP_CODE:
                await release_first.wait()
                return mock_center
            return mock_other_center

        mock_geo_lookup.resolve.side_effect = resolve
        mock_place_search.search.return_value = mock_search_results

        first = asyncio.create_task(controller.submit_postal_code(ZIP_CODE))
        await asyncio.sleep(0)
        await controller.submit_postal_code(OTHER_ZIP_CODE)
        release_first.set()
        await first

        state = controller.state
        assert state.postal_code == OTHER_ZIP_CODE
        assert state.user_marker.coordinate == mock_other_center
        assert all(place.search_center == mock_other_center for place in state.places)
        mock_place_search.search.assert_called_once()

    async def test_stale_search_result_is_discarded(
        self,
        controller,
        mock_geo_lookup,
        mock_place_search,
        mock_center,
        mock_other_center,
        mock_search_results,
    ):
        release_first = asyncio.Event()

        async def resolve(text):
            return mock_center if text == ZIP_CODE else mock_other_center

        async def search(query, center, region_meters):
            if center == mock_center:
                await release_first.wait()
                return mock_search_results
            return mock_search_results[:1]

        mock_geo_lookup.resolve.side_effect = resolve
        mock_place_search.search.side_effect = search

        first = asyncio.create_task(controller.submit_postal_code(ZIP_CODE))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        await controller.submit_postal_code(OTHER_ZIP_CODE)
        release_first.set()
        await first

        state = controller.state
        assert len(state.places) == 1
        assert state.places[0].search_center == mock_other_center
        assert state.user_marker.coordinate == mock_other_center
        assert state.viewport.center == mock_other_center
        assert state.is_searching is False

    async def test_failed_geocode_does_not_cancel_search_in_flight(
        self,
        controller,
        mock_geo_lookup,
        mock_place_search,
        mock_center,
        mock_search_results,
    ):
        """A newer zip code that fails to geocode leaves the older search running."""
        release_search = asyncio.Event()

        async def resolve(text):
            if text == ZIP_CODE:
                return mock_center
            raise GeocodeFailure(f"No results for '{text}'")

        async def search(query, center, region_meters):
            await release_search.wait()
            return mock_search_results

        mock_geo_lookup.resolve.side_effect = resolve
        mock_place_search.search.side_effect = search

        first = asyncio.create_task(controller.submit_postal_code(ZIP_CODE))
        await asyncio.sleep(0)
        await controller.submit_postal_code("bogus")
        assert controller.state.is_searching is True
        release_search.set()
        await first

        state = controller.state
        assert state.is_searching is False
        assert state.error_message == INVALID_ZIP_MESSAGE
        assert state.user_marker.coordinate == mock_center
        assert len(state.places) == 5
        assert all(place.search_center == mock_center for place in state.places)

    async def test_stale_search_failure_clears_flag_when_idle(
        self, controller, mock_place_search, mock_center, mock_other_center
    ):
        """An older search that fails after a newer one finished does not leave the flag set."""
        release_first = asyncio.Event()

        async def search(query, center, region_meters):
            if center == mock_center:
                await release_first.wait()
                raise SearchFailure("timed out")
            return []

        mock_place_search.search.side_effect = search

        first = asyncio.create_task(controller.run_search(mock_center))
        await asyncio.sleep(0)
        await controller.run_search(mock_other_center)
        release_first.set()
        await first

        state = controller.state
        assert state.is_searching is False
        assert state.error_message == NO_RESULTS_MESSAGE


class TestDismissError:
    def test_dismiss_hides_alert(self, controller):
        controller.state.show_error(INVALID_ZIP_MESSAGE)

        state = controller.dismiss_error()

        assert state.showing_error is False
        assert state.error_message == INVALID_ZIP_MESSAGE
