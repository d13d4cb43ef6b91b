"""Mood Tracker - record mood ratings and review daily trends."""

__version__ = "0.1.0"
