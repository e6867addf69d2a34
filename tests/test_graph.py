import pytest

from metroroute.graph import (
    Edge,
    Graph,
    Station,
    UnknownStationError,
    calculate_fare,
    estimate_travel_time,
)


@pytest.fixture
def graph():
    g = Graph()
    g.add_station("Alpha", "Blue Line")
    g.add_station("Beta", "Blue & Yellow Line")
    g.add_station("Gamma", "Yellow Line")
    g.add_station("Delta", "Red Line")
    g.add_station("Island", "Green Line")
    g.add_edge("Alpha", "Beta", 2)
    g.add_edge("Beta", "Gamma", 3)
    g.add_edge("Alpha", "Gamma", 10)
    g.add_edge("Gamma", "Delta", 4)
    return g


def path_length(g, path):
    total = 0
    for a, b in zip(path, path[1:]):
        total += min(e.distance for e in g.neighbours(a) if e.destination == b)
    return total


def test_stations_are_listed_in_order(graph):
    assert graph.station_names() == ["Alpha", "Beta", "Gamma", "Delta", "Island"]
    assert len(graph) == 5
    assert "Beta" in graph
    assert graph.has_station("Gamma")
    assert not graph.has_station("Omega")


def test_station_lookup_round_trip(graph):
    for name in graph.station_names():
        assert graph.station(graph.station_index(name)).name == name
    assert graph.station(graph.station_index("Beta")) == Station("Beta", "Blue & Yellow Line")


def test_station_out_of_range_is_empty(graph):
    assert graph.station(99) == Station()
    assert graph.station(-1) == Station("", "")


def test_unknown_station_index_raises(graph):
    with pytest.raises(UnknownStationError):
        graph.station_index("Omega")


def test_edges_are_undirected(graph):
    a = graph.station_index("Alpha")
    b = graph.station_index("Beta")
    assert Edge(b, 2) in graph.neighbours(a)
    assert Edge(a, 2) in graph.neighbours(b)


def test_add_edge_with_unknown_station_raises(graph):
    with pytest.raises(UnknownStationError):
        graph.add_edge("Alpha", "Omega", 1)
    assert len(graph.neighbours(graph.station_index("Alpha"))) == 2


def test_shortest_path_prefers_cheaper_route(graph):
    distance, path = graph.shortest_path("Alpha", "Gamma")
    expected = [graph.station_index(n) for n in ("Alpha", "Beta", "Gamma")]
    assert path == expected
    assert distance == path_length(graph, path)


def test_shortest_path_is_symmetric(graph):
    forward, fpath = graph.shortest_path("Alpha", "Delta")
    backward, bpath = graph.shortest_path("Delta", "Alpha")
    assert forward == backward
    assert bpath == list(reversed(fpath))
    assert forward == path_length(graph, fpath)


def test_path_to_self(graph):
    index = graph.station_index("Beta")
    assert graph.dijkstra(index, index) == (0, [index])


def test_unreachable_station(graph):
    assert graph.shortest_path("Alpha", "Island") == (None, [])


def test_shortest_path_unknown_name_raises(graph):
    with pytest.raises(UnknownStationError):
        graph.shortest_path("Alpha", "Omega")


def test_dijkstra_invalid_index_raises(graph):
    with pytest.raises(IndexError):
        graph.dijkstra(0, 50)


def test_render_map(graph):
    text = graph.render_map()
    assert text.startswith("\n===== Delhi Metro Map =====\n")
    assert text.endswith("==========================\n")
    assert "Station: Alpha (Line: Blue Line)\n  Connected to: Beta (2 km) Gamma (10 km) \n" in text
    assert "Station: Island (Line: Green Line)\n  Connected to: \n" in text


@pytest.mark.parametrize(
    "distance, fare",
    [(0, 0), (-3, 0), (2, 10), (5, 20), (12, 30), (21, 40), (32, 50), (33, 60)],
)
def test_fare_bands(distance, fare):
    assert calculate_fare(distance) == fare


def test_fare_never_decreases_with_distance():
    fares = [calculate_fare(d) for d in range(0, 60)]
    assert fares == sorted(fares)


def test_travel_time_rounds_half_up():
    assert estimate_travel_time(1, 0) == 2
    assert estimate_travel_time(0, 3) == 6


def test_travel_time_grows_with_changes():
    assert estimate_travel_time(10, 2) - estimate_travel_time(10, 0) == 4