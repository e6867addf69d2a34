"""Interactive menu for exploring the Delhi metro network and planning trips."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from metroroute.graph import Graph, calculate_fare, estimate_travel_time

_STATIONS = (
    ("Rajiv Chowk", "Blue & Yellow Line"),
    ("Kashmere Gate", "Red & Yellow Line"),
    ("Central Secretariat", "Yellow & Violet Line"),
    ("Mandi House", "Blue & Violet Line"),
    ("Yamuna Bank", "Blue Line"),
    ("Inderlok", "Red & Green Line"),
    ("Kirti Nagar", "Blue & Green Line"),
    ("Welcome", "Red & Pink Line"),
    ("Netaji Subhash Place", "Pink & Red Line"),
    ("Azadpur", "Yellow & Pink Line"),
    ("Dhaula Kuan", "Orange Line"),
    ("New Delhi", "Yellow & Orange Line"),
    ("Dwarka Sector 21", "Blue & Orange Line"),
    ("Botanical Garden", "Blue & Magenta Line"),
    ("Janakpuri West", "Blue & Magenta Line"),
    ("Lajpat Nagar", "Violet & Pink Line"),
    ("Mayur Vihar Phase-1", "Blue & Pink Line"),
    ("Anand Vihar", "Blue & Pink Line"),
    ("Saket", "Yellow Line"),
    ("Chandni Chowk", "Yellow Line"),
)

_CONNECTIONS = (
    # Blue Line
    ("Rajiv Chowk", "Mandi House", 2),
    ("Mandi House", "Yamuna Bank", 6),
    ("Rajiv Chowk", "Kirti Nagar", 7),
    ("Kirti Nagar", "Janakpuri West", 9),
    ("Yamuna Bank", "Anand Vihar", 8),
    ("Botanical Garden", "Janakpuri West", 38),
    ("Yamuna Bank", "Mayur Vihar Phase-1", 3),
    # Yellow Line
    ("Rajiv Chowk", "Central Secretariat", 3),
    ("Central Secretariat", "Saket", 10),
    ("Rajiv Chowk", "New Delhi", 1),
    ("New Delhi", "Chandni Chowk", 2),
    ("Chandni Chowk", "Kashmere Gate", 2),
    ("Kashmere Gate", "Azadpur", 8),
    # Red Line
    ("Kashmere Gate", "Inderlok", 7),
    ("Inderlok", "Netaji Subhash Place", 5),
    ("Kashmere Gate", "Welcome", 5),
    # Green Line
    ("Inderlok", "Kirti Nagar", 8),
    # Violet Line
    ("Central Secretariat", "Mandi House", 2),
    ("Mandi House", "Lajpat Nagar", 6),
    # Orange Line (Airport Express)
    ("New Delhi", "Dhaula Kuan", 7),
    ("Dhaula Kuan", "Dwarka Sector 21", 15),
    # Pink Line
    ("Azadpur", "Netaji Subhash Place", 4),
    ("Netaji Subhash Place", "Welcome", 12),
    ("Welcome", "Anand Vihar", 10),
    ("Anand Vihar", "Mayur Vihar Phase-1", 6),
    ("Mayur Vihar Phase-1", "Lajpat Nagar", 10),
)

_PAUSE = "\nPress Enter to continue..."
_INT_PREFIX = re.compile(r"[+-]?\d+")


def build_delhi_metro() -> Graph:
    """Return the built-in Delhi metro network."""
    graph = Graph()
    for name, line in _STATIONS:
        graph.add_station(name, line)
    for src, dest, distance in _CONNECTIONS:
        graph.add_edge(src, dest, distance)
    return graph


def estimate_line_changes(path_length: int) -> int:
    """Rough number of interchanges for a path visiting ``path_length`` stations."""
    if path_length > 2:
        return path_length // 4
    return 0


@dataclass(frozen=True)
class RouteDetails:
    """The outcome of planning a journey between two stations."""

    source: str
    destination: str
    distance: int
    fare: int
    travel_time: int
    line_changes: int
    path: tuple[int, ...]


def plan_route(graph: Graph, source: str, destination: str) -> RouteDetails | None:
    """Plan the shortest journey, or return None when no path exists.

    Raises UnknownStationError if either station is not in the graph.
    """
    distance, path = graph.shortest_path(source, destination)
    if distance is None or not path:
        return None
    changes = estimate_line_changes(len(path))
    return RouteDetails(
        source=source,
        destination=destination,
        distance=distance,
        fare=calculate_fare(distance),
        travel_time=estimate_travel_time(distance, changes),
        line_changes=changes,
        path=tuple(path),
    )


def format_route(graph: Graph, details: RouteDetails) -> str:
    """Render the journey summary and station-by-station path."""
    lines = [
        "\n========== ROUTE DETAILS ==========",
        f"Source: {details.source}",
        f"Destination: {details.destination}",
        f"Total Distance: {details.distance} km",
        f"Total Fare: Rs {details.fare}",
        f"Estimated Travel Time: {details.travel_time} minutes",
        f"Estimated Line Changes: {details.line_changes}",
        "\n========== SHORTEST PATH ==========",
    ]
    first, *rest = details.path
    start = graph.station(first)
    lines.append(f"Start at: {start.name} ({start.line})")
    for index in rest:
        station = graph.station(index)
        lines.append(f"-> {station.name} ({station.line})")
    lines.append("====================================")
    return "\n".join(lines) + "\n"


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


class MetroApp:
    """Menu-driven front end reading from ``stdin`` and writing to ``stdout``."""

    def __init__(
        self,
        graph: Graph | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.graph = graph if graph is not None else build_delhi_metro()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_screen

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _pause(self) -> None:
        self._write(_PAUSE)
        self._stdin.readline()

    def _read_line(self, prompt: str) -> str:
        self._write(prompt)
        return self._stdin.readline().rstrip("\n")

    def _read_int(self, prompt: str) -> int | None:
        """Read an integer, re-prompting on bad input; None at end of input."""
        self._write(prompt)
        while True:
            line = self._stdin.readline()
            if not line:
                return None
            tokens = line.split()
            if not tokens:
                continue
            match = _INT_PREFIX.match(tokens[0])
            if match:
                return int(match.group())
            self._write("Invalid input. " + prompt)

    def display_all_stations(self) -> None:
        """List every station, numbered from one."""
        self._clear()
        lines = ["\n========== ALL METRO STATIONS =========="]
        lines.extend(
            f"{number}. {name}"
            for number, name in enumerate(self.graph.station_names(), start=1)
        )
        lines.append("======================================")
        self._write("\n".join(lines) + "\n")
        self._pause()

    def show_metro_map(self) -> None:
        """Print every station with its connections."""
        self._clear()
        self._write(self.graph.render_map())
        self._pause()

    def get_route_and_fare(self) -> None:
        """Ask for two stations and print the shortest route between them."""
        self._clear()
        self._write("\n========== GET ROUTE & FARE ==========\n")

        source = self._read_line("Enter source station: ")
        if not self.graph.has_station(source):
            self._write("Source station not found!\n")
            self._pause()
            return

        destination = self._read_line("Enter destination station: ")
        if not self.graph.has_station(destination):
            self._write("Destination station not found!\n")
            self._pause()
            return

        details = plan_route(self.graph, source, destination)
        if details is None:
            self._write(f"No path found between {source} and {destination}\n")
        else:
            self._write(format_route(self.graph, details))
        self._pause()

    def run(self) -> None:
        """Show the menu until the user chooses to exit or input runs out."""
        actions = {
            1: self.display_all_stations,
            2: self.show_metro_map,
            3: self.get_route_and_fare,
        }
        while True:
            self._clear()
            self._write(
                "\n========== DELHI METRO APP ==========\n"
                "1. List All Stations\n"
                "2. Show Metro Map\n"
                "3. Get Shortest Route & Fare\n"
                "4. Exit\n"
                "====================================\n"
                "Enter your choice: "
            )
            choice = self._read_int("")
            if choice is None or choice == 4:
                break
            action = actions.get(choice)
            if action is None:
                self._write("Invalid choice. Press Enter to continue...")
                self._stdin.readline()
            else:
                action()
        self._write("\nThank you for using Delhi Metro App!\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive metro application."""
    parser = argparse.ArgumentParser(
        prog="metroroute",
        description="Find routes, fares and travel times on the Delhi metro.",
    )
    parser.parse_args(argv)
    MetroApp().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())