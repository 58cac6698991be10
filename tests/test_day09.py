from itertools import permutations

import pytest

from aoc2015.day09 import Cities, Route, Trip, part_one, part_two

EXAMPLE = """\
London to Dublin = 464
London to Belfast = 518
Dublin to Belfast = 141
"""


def make_cities(text=EXAMPLE):
    cities = Cities()
    for line in text.splitlines():
        cities.insert(line)
    return cities


def test_insert_adds_both_directions():
    cities = make_cities("London to Dublin = 464")
    assert cities.cities["London"] == [Route("Dublin", 464)]
    assert cities.cities["Dublin"] == [Route("London", 464)]
    assert len(cities) == 2


def test_insert_ignores_unmatched_lines():
    cities = make_cities("not a route\n")
    assert len(cities) == 0


def test_trip_distance_sums_routes():
    trip = Trip((Route("A", 0), Route("B", 7), Route("C", 5)))
    assert trip.distance() == 12


def test_find_trips_covers_every_ordering():
    trips = make_cities().find_trips()
    orders = [tuple(r.destination for r in trip.routes) for trip in trips]
    assert len(orders) == len(set(orders))
    assert set(orders) == set(permutations(["Belfast", "Dublin", "London"]))


def test_trips_start_with_zero_leg_in_name_order():
    trips = make_cities().find_trips()
    assert all(trip.routes[0].distance == 0 for trip in trips)
    starts = [trip.routes[0].destination for trip in trips]
    assert starts == sorted(starts)


def test_reversed_trip_has_same_distance():
    trips = make_cities().find_trips()
    by_order = {tuple(r.destination for r in t.routes): t.distance() for t in trips}
    for order, distance in by_order.items():
        assert by_order[order[::-1]] == distance


def test_single_city_has_no_trips():
    cities = Cities({"Alone": []})
    assert cities.find_trips() == []


def test_part_one_shortest():
    assert part_one(EXAMPLE) == 605


def test_part_two_longest():
    assert part_two(EXAMPLE) == 982


def test_part_one_not_above_part_two():
    assert part_one(EXAMPLE) <= part_two(EXAMPLE)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")