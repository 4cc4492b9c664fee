"""termunify: most general unifiers for sets of first-order term equations."""

__version__ = "0.1.0"
