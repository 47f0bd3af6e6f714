"""
Unit Tests for Leg and Itinerary Value Objects

Covers leg validation, ordering, the empty itinerary and immutability.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from cargotracker.domain.cargo.value_objects.itinerary import Itinerary, Leg
from cargotracker.domain.shared.exceptions import InvalidItineraryError


class TestLeg:
    """Test Leg construction."""

    def test_create_leg(self):
        leg = Leg(load_location="NYC", unload_location="HONOLULU", voyage_number="V42")
        assert leg.load_location == "NYC"
        assert leg.unload_location == "HONOLULU"
        assert leg.voyage_number == "V42"

    def test_same_load_and_unload_location_raises(self):
        with pytest.raises(InvalidItineraryError, match="must differ"):
            Leg(load_location="NYC", unload_location="NYC")

    def test_missing_location_raises(self):
        with pytest.raises(InvalidItineraryError) as exc_info:
            Leg(load_location="NYC")
        assert exc_info.value.field_name == "unload_location"

    def test_malformed_voyage_number_raises(self):
        with pytest.raises(InvalidItineraryError):
            Leg(load_location="NYC", unload_location="TOKYO", voyage_number="v 1")

    def test_unload_before_load_raises(self):
        load_time = datetime(2030, 5, 1, 12, tzinfo=timezone.utc)
        with pytest.raises(InvalidItineraryError):
            Leg(
                load_location="NYC",
                unload_location="TOKYO",
                load_time=load_time,
                unload_time=load_time - timedelta(hours=1),
            )

    def test_naive_times_are_read_as_utc(self):
        leg = Leg(
            load_location="NYC",
            unload_location="TOKYO",
            load_time=datetime(2030, 5, 1, 12),
        )
        assert leg.load_time == datetime(2030, 5, 1, 12, tzinfo=timezone.utc)

    def test_non_datetime_time_raises(self):
        with pytest.raises(InvalidItineraryError):
            Leg(load_location="NYC", unload_location="TOKYO", unload_time="tomorrow")

    def test_legs_with_equal_attributes_are_equal(self):
        first = Leg(load_location="NYC", unload_location="TOKYO")
        second = Leg(load_location="NYC", unload_location="TOKYO")
        assert first.same_value_as(second)
        assert hash(first) == hash(second)


class TestItineraryCreation:
    """Test Itinerary construction."""

    def test_empty_itinerary_is_valid(self):
        itinerary = Itinerary(legs=[])
        assert itinerary.legs == ()
        assert itinerary.is_empty
        assert len(itinerary) == 0

    def test_empty_factory_returns_unrouted_itinerary(self):
        assert Itinerary.empty().is_empty
        assert Itinerary.empty() == Itinerary()
        assert Itinerary.empty() is Itinerary.empty()

    def test_legs_keep_their_order(self, nyc_osaka_itinerary):
        assert [leg.load_location for leg in nyc_osaka_itinerary.legs] == [
            "NYC",
            "HONOLULU",
        ]
        assert nyc_osaka_itinerary.initial_departure_location == "NYC"
        assert nyc_osaka_itinerary.final_arrival_location == "OSAKA"
        assert len(nyc_osaka_itinerary) == 2

    def test_legs_are_stored_as_tuple(self):
        legs = [Leg(load_location="NYC", unload_location="TOKYO")]
        itinerary = Itinerary(legs=legs)
        legs.append(Leg(load_location="TOKYO", unload_location="OSAKA"))
        assert isinstance(itinerary.legs, tuple)
        assert len(itinerary) == 1

    def test_legs_can_be_given_as_mappings(self):
        itinerary = Itinerary(
            legs=[{"load_location": "NYC", "unload_location": "TOKYO"}]
        )
        assert itinerary.legs[0] == Leg(load_location="NYC", unload_location="TOKYO")

    def test_of_factory(self):
        first = Leg(load_location="NYC", unload_location="HONOLULU")
        second = Leg(load_location="HONOLULU", unload_location="OSAKA")
        assert Itinerary.of(first, second).legs == (first, second)

    @pytest.mark.parametrize("bad_legs", ["NYC-TOKYO", 5, [("NYC", "TOKYO")], [None]])
    def test_malformed_legs_raise(self, bad_legs):
        with pytest.raises(InvalidItineraryError):
            Itinerary(legs=bad_legs)

    def test_empty_itinerary_has_no_endpoints(self):
        empty = Itinerary.empty()
        assert empty.initial_departure_location is None
        assert empty.final_arrival_location is None
        assert empty.final_arrival_time is None
        assert empty.is_connected


class TestItineraryValueSemantics:
    """Test equality and immutability of itineraries."""

    def test_same_legs_are_equal(self, nyc_osaka_itinerary):
        copy = Itinerary(legs=list(nyc_osaka_itinerary.legs))
        assert copy.same_value_as(nyc_osaka_itinerary)
        assert hash(copy) == hash(nyc_osaka_itinerary)

    def test_order_matters(self, nyc_osaka_itinerary):
        reversed_legs = Itinerary(legs=list(reversed(nyc_osaka_itinerary.legs)))
        assert not reversed_legs.same_value_as(nyc_osaka_itinerary)

    def test_connected_itinerary(self, nyc_osaka_itinerary):
        assert nyc_osaka_itinerary.is_connected

    def test_disconnected_itinerary(self):
        itinerary = Itinerary.of(
            Leg(load_location="NYC", unload_location="HONOLULU"),
            Leg(load_location="SEATTLE", unload_location="OSAKA"),
        )
        assert not itinerary.is_connected

    def test_legs_cannot_be_reassigned(self, nyc_osaka_itinerary):
        with pytest.raises(ValidationError):
            nyc_osaka_itinerary.legs = ()
