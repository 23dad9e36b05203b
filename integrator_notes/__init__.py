"""Integrator Notes: weekly meeting-summary parsing and rolling views."""

__version__ = "0.1.0"
