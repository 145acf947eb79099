"""Vacation planner: weather, country facts, exchange rates and a packing list for a trip."""

__version__ = "1.0.0"
