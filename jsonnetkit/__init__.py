"""Jsonnet building blocks: locations, fodder, identifier sets, operators, text, math, manifesting and parsing."""

__version__ = "0.1.0"

__all__ = [
    "location",
    "identifiers",
    "fodder",
    "operators",
    "text",
    "mathfuncs",
    "manifest",
    "parsing",
]