"""Command-line interface for Costar."""
