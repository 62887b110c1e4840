"""API models for distance endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DistanceRequest(BaseModel):
    """Two raw records (user, listing, ...) to measure between.

    Records may carry coordinates under any supported spelling, e.g.
    ``latitude``/``longitude``, ``lat``/``lng``, ``location_latitude`` or
    nested ``location``/``coords`` objects.
    """

    origin: dict[str, Any] = Field(..., examples=[{"latitude": 40.7128, "longitude": -74.006}])
    destination: dict[str, Any] = Field(..., examples=[{"lat": "34.0522", "lng": "-118.2437"}])


class DistanceResponse(BaseModel):
    """Distance between two records."""

    model_config = ConfigDict(strict=True)

    miles: float | None = None
    label: str
