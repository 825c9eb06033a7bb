"""Reporting package."""

from .stats import avg_rating_by_destination, place_stats

__all__ = ["place_stats", "avg_rating_by_destination"]
