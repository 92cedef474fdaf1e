# pgpoint/geo/schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PointJson(BaseModel):
    """JSON form of a point: {"lat": <number>, "lng": <number>}.

    Strict: numbers only (ints are widened to float), no numeric strings or bools.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    lat: float = Field(allow_inf_nan=False)
    lng: float = Field(allow_inf_nan=False)
