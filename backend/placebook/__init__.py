"""Placebook: a small multi-user service for saving named locations."""

__version__ = "0.1.0"
