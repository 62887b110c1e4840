"""Availability and interval-scheduling engine for rental listings."""

__version__ = "0.1.0"
