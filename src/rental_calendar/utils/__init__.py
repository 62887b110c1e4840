"""Utility helpers for the rental calendar engine."""
