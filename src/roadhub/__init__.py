"""roadhub: find the capital city that every road leads to."""

from roadhub.domain.capital import find_central_node

__version__ = "0.1.0"

__all__ = ["__version__", "find_central_node"]
