"""Costar - co-star network connectivity explorer.

Shortest-path ("Bacon number") queries over an actor co-appearance graph
using breadth-first search.
"""

__version__ = "0.1.0"
