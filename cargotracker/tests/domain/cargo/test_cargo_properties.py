"""
Property-Based Tests for the Cargo Aggregate

Uses Hypothesis to check that identity and origin hold across arbitrary
sequences of re-routing and route assignment, and that entity sameness
depends on the tracking id alone.
"""

from hypothesis import given, settings, strategies as st

from cargotracker.domain.cargo.entities.cargo import Cargo
from cargotracker.domain.cargo.value_objects.itinerary import Itinerary, Leg
from cargotracker.domain.cargo.value_objects.route_specification import (
    RouteSpecification,
)
from cargotracker.domain.cargo.value_objects.tracking_id import TrackingId

location_codes = st.from_regex(r"[A-Z]{3,10}", fullmatch=True)


@st.composite
def tracking_ids(draw):
    return TrackingId(value=draw(st.uuids()))


@st.composite
def route_specifications(draw):
    origin, destination = draw(
        st.lists(location_codes, min_size=2, max_size=2, unique=True)
    )
    return RouteSpecification(origin=origin, destination=destination)


@st.composite
def itineraries(draw):
    """Connected itineraries through distinct stops, possibly empty."""
    stops = draw(st.lists(location_codes, min_size=0, max_size=5, unique=True))
    if len(stops) < 2:
        return Itinerary.empty()
    return Itinerary(
        legs=[
            Leg(load_location=load, unload_location=unload)
            for load, unload in zip(stops, stops[1:])
        ]
    )


# A re-route is either a new specification or a new itinerary
changes = st.one_of(route_specifications(), itineraries())


@given(tracking_id=tracking_ids(), spec=route_specifications())
def test_booking_fixes_identity_and_origin(tracking_id, spec):
    cargo = Cargo.create(tracking_id, spec)

    assert cargo.tracking_id.same_value_as(tracking_id)
    assert cargo.origin == spec.origin
    assert cargo.itinerary.is_empty


@settings(max_examples=50)
@given(
    tracking_id=tracking_ids(),
    spec=route_specifications(),
    history=st.lists(changes, max_size=8),
)
def test_rerouting_never_changes_identity_or_origin(tracking_id, spec, history):
    cargo = Cargo.create(tracking_id, spec)

    for change in history:
        if isinstance(change, RouteSpecification):
            cargo.specify_new_route(change)
            assert cargo.route_specification == change
        else:
            cargo.assign_to_route(change)
            assert cargo.itinerary == change

        assert cargo.tracking_id.same_value_as(tracking_id)
        assert cargo.origin == spec.origin


@given(
    tracking_id=tracking_ids(),
    first_spec=route_specifications(),
    second_spec=route_specifications(),
    itinerary=itineraries(),
)
def test_same_identity_depends_only_on_tracking_id(
    tracking_id, first_spec, second_spec, itinerary
):
    first = Cargo.create(tracking_id, first_spec)
    second = Cargo.create(TrackingId.from_string(str(tracking_id)), second_spec)
    second.assign_to_route(itinerary)

    assert first.same_identity_as(first)
    assert first.same_identity_as(second)
    assert second.same_identity_as(first)


@given(first=tracking_ids(), second=tracking_ids(), spec=route_specifications())
def test_different_tracking_ids_are_never_the_same(first, second, spec):
    expected = first.to_string() == second.to_string()
    assert Cargo.create(first, spec).same_identity_as(Cargo.create(second, spec)) is expected


@given(value=st.uuids())
def test_tracking_ids_from_same_value_are_the_same(value):
    assert TrackingId(value=value).same_value_as(TrackingId.from_string(str(value)))
