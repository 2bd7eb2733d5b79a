"""Command line interface for propgate."""
