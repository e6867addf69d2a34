"""Undirected weighted graph of metro stations with route, fare and time helpers."""

from __future__ import annotations

from dataclasses import dataclass

from metroroute.heap import MinHeap


class UnknownStationError(LookupError):
    """Raised when a station name is not part of the network."""


@dataclass(frozen=True)
class Station:
    """A metro station and the line (or lines) serving it."""

    name: str = ""
    line: str = ""


@dataclass(frozen=True)
class Edge:
    """A connection to another station, by index, with its length in km."""

    destination: int
    distance: int


_FARE_BANDS = ((0, 0), (2, 10), (5, 20), (12, 30), (21, 40), (32, 50))
_MAX_FARE = 60


def calculate_fare(distance: int) -> int:
    """Return the fare in rupees for a journey of ``distance`` km."""
    for limit, fare in _FARE_BANDS:
        if distance <= limit:
            return fare
    return _MAX_FARE


def estimate_travel_time(distance: int, changes: int) -> int:
    """Minutes for a journey: 1.5 per km plus 2 per interchange, rounded half away from zero."""
    halves = 3 * distance + 4 * changes
    if halves % 2 == 0:
        return halves // 2
    if halves > 0:
        return (halves + 1) // 2
    return -((-halves + 1) // 2)


class Graph:
    """A metro network: stations joined by two-way connections."""

    def __init__(self) -> None:
        self._stations: list[Station] = []
        self._adjacency: list[list[Edge]] = []
        self._indices: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, name: object) -> bool:
        return name in self._indices

    def add_station(self, name: str, line: str) -> None:
        """Add a station; a repeated name then refers to the newest one."""
        self._indices[name] = len(self._stations)
        self._stations.append(Station(name, line))
        self._adjacency.append([])

    def add_edge(self, src: str, dest: str, distance: int) -> None:
        """Connect two existing stations in both directions."""
        missing = [name for name in (src, dest) if name not in self._indices]
        if missing:
            raise UnknownStationError(
                f"One or both stations do not exist: {src}, {dest}"
            )
        src_index = self._indices[src]
        dest_index = self._indices[dest]
        self._adjacency[src_index].append(Edge(dest_index, distance))
        self._adjacency[dest_index].append(Edge(src_index, distance))

    def has_station(self, name: str) -> bool:
        """Return True if a station with this name exists."""
        return name in self._indices

    def station_index(self, name: str) -> int:
        """Return the index of the named station."""
        try:
            return self._indices[name]
        except KeyError:
            raise UnknownStationError(f"Station not found: {name}") from None

    def station(self, index: int) -> Station:
        """Return the station at ``index``, or an empty station if out of range."""
        if 0 <= index < len(self._stations):
            return self._stations[index]
        return Station()

    def station_names(self) -> list[str]:
        """Return station names in the order they were added."""
        return [station.name for station in self._stations]

    def neighbours(self, index: int) -> tuple[Edge, ...]:
        """Return the connections leaving the station at ``index``."""
        self._check_index(index)
        return tuple(self._adjacency[index])

    def dijkstra(self, src: int, dest: int) -> tuple[int | None, list[int]]:
        """Shortest distance and path of indices from ``src`` to ``dest``.

        Returns ``(None, [])`` when ``dest`` cannot be reached.
        """
        self._check_index(src)
        self._check_index(dest)
        count = len(self._stations)
        distance: list[int | None] = [None] * count
        parent: list[int | None] = [None] * count
        heap = MinHeap(count)

        distance[src] = 0
        heap.insert(src, 0)
        while heap:
            _, u = heap.extract_min()
            if u == dest:
                break
            base = distance[u]
            if base is None:
                continue
            for edge in self._adjacency[u]:
                v = edge.destination
                candidate = base + edge.distance
                current = distance[v]
                if current is None or candidate < current:
                    distance[v] = candidate
                    parent[v] = u
                    if v in heap:
                        heap.decrease_key(v, candidate)
                    else:
                        heap.insert(v, candidate)

        total = distance[dest]
        if total is None:
            return None, []
        path: list[int] = []
        node: int | None = dest
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return total, path

    def shortest_path(self, src_name: str, dest_name: str) -> tuple[int | None, list[int]]:
        """Shortest distance and path between two stations given by name."""
        return self.dijkstra(self.station_index(src_name), self.station_index(dest_name))

    def render_map(self) -> str:
        """Return a text listing of every station and its connections."""
        parts = ["\n===== Delhi Metro Map =====\n"]
        for station, edges in zip(self._stations, self._adjacency):
            parts.append(f"Station: {station.name} (Line: {station.line})\n")
            parts.append("  Connected to: ")
            parts.extend(
                f"{self._stations[edge.destination].name} ({edge.distance} km) "
                for edge in edges
            )
            parts.append("\n")
        parts.append("==========================\n")
        return "".join(parts)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._stations):
            raise IndexError(f"station index {index} out of range")