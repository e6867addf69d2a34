# metroroute

metroroute finds the shortest route between two stations of a metro network.
For that route it also works out the fare and an estimated travel time. It
ships with a model of the main interchange stations of the Delhi Metro and an
interactive menu for exploring it.

## Installation

```
pip install .
```

## The interactive menu

```
metroroute
```

The menu offers these choices:

1. **List All Stations**: every station, numbered in the order it was added.
2. **Show Metro Map**: each station with its line and its connections, with distances in km.
3. **Get Shortest Route & Fare**: asks for a source station and a destination station. It then prints:
   - the total distance;
   - the fare;
   - the estimated travel time;
   - the estimated number of line changes;
   - the stations along the way.
4. **Exit**

Station names must be typed exactly as they are listed, for example
`Rajiv Chowk` or `Kashmere Gate`. The menu also ends when its input runs out.
Before each screen it clears the terminal with the system's `clear` (or `cls`
on Windows) command.

## Using it as a library

```python
from metroroute.graph import Graph, calculate_fare, estimate_travel_time

graph = Graph()
graph.add_station("A", "Blue Line")
graph.add_station("B", "Blue Line")
graph.add_station("C", "Yellow Line")
graph.add_edge("A", "B", 2)
graph.add_edge("B", "C", 4)

distance, path = graph.shortest_path("A", "C")
print(distance)                                 # 6
print([graph.station(i).name for i in path])    # ['A', 'B', 'C']
print(calculate_fare(distance))                 # 30
print(estimate_travel_time(distance, 1))        # 11
print(graph.render_map())
```

Connections are undirected, and their distances are whole kilometres.

- `Graph.add_edge` and `Graph.shortest_path` raise
  `metroroute.graph.UnknownStationError` for a station name that is not in the
  graph.
- `Graph.shortest_path` and `Graph.dijkstra` return `(None, [])` when the
  destination cannot be reached.
- `Graph.station(index)` returns an empty `Station` for an index out of range.
- `Graph.neighbours(index)` returns the `Edge` objects leaving a station.

`metroroute.heap.MinHeap` is the indexed min-heap the search uses. It supports
`insert`, `extract_min`, `decrease_key` and `distance_of`, and raises
`HeapError` on misuse.

`metroroute.app.build_delhi_metro()` returns the bundled Delhi Metro network as
a `Graph`. `metroroute.app.plan_route(graph, source, destination)` returns a
`RouteDetails` with the distance, fare, travel time, estimated line changes and
path for a trip. It returns `None` when no path exists.
`metroroute.app.format_route(graph, details)` renders a `RouteDetails` as the
text that the menu prints. `metroroute.app.MetroApp` runs the menu over any
text streams you give it.

### Fares

| Distance (km) | Fare (Rs) |
|---------------|-----------|
| 0 or less     | 0         |
| up to 2       | 10        |
| up to 5       | 20        |
| up to 12      | 30        |
| up to 21      | 40        |
| up to 32      | 50        |
| more than 32  | 60        |

### Travel time

Each kilometre takes 1.5 minutes, and each line change adds 2 minutes. The
total is rounded to the nearest minute, with halves rounded away from zero.

The menu estimates line changes from the length of the route. A route of more
than two stations counts one change for every four stations on it. Changes are
not worked out from the stations' lines.

## Running the tests

```
pip install ".[test]"
pytest
```