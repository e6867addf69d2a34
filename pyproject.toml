[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metroroute"
version = "0.1.0"
description = "Shortest routes, fares and travel times across a metro network, with an interactive menu for the Delhi Metro."
requires-python = ">=3.10"
dependencies = []
keywords = ["metro", "dijkstra", "shortest-path", "routing", "fare", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metroroute = "metroroute.app:main"

[tool.hatch.build.targets.wheel]
packages = ["metroroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
