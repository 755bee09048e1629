"""Configuration loading for aigcw."""
