"""Core graph algorithms and queries for Costar.

Nothing in this package may import from cli/.
"""
