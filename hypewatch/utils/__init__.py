"""Configuration, logging and pacing helpers."""
