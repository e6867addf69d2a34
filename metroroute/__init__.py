"""Shortest routes, fares and travel times across a metro network, with a Delhi Metro menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]