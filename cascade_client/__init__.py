"""Monitoring client core: time points, alerts, sensors, pages and device connections."""

__version__ = "0.1.0"