"""Command line interface for aigcw."""
