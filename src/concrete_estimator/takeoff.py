from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field

from .dictionaries import INCHES_PER_FOOT

CUBIC_FEET_PER_CUBIC_YARD = 27.0

TakeoffMode = Literal["sqft", "cubic_yards", "inches", "grid_cores"]


class TakeoffRequest(BaseModel):
    mode: TakeoffMode
    length: float | None = None
    width: float | None = None
    depth: float | None = None
    feet: float | None = None
    spacing_length: float | None = Field(default=None, description="Grid spacing along the length")
    spacing_width: float | None = Field(default=None, description="Grid spacing along the width")


class TakeoffResult(BaseModel):
    mode: TakeoffMode
    value: float


def square_feet(length: float | None, width: float | None) -> float:
    if not length or not width:
        return 0.0
    return round(length * width, 2)


def cubic_yards(length: float | None, width: float | None, depth: float | None) -> float:
    """Volume in cubic yards from feet dimensions."""
    if not length or not width or not depth:
        return 0.0
    return round(length * width * depth / CUBIC_FEET_PER_CUBIC_YARD, 2)


def feet_to_inches(feet: float | None) -> float:
    if not feet:
        return 0.0
    return round(feet * INCHES_PER_FOOT, 2)


def grid_core_count(
    length: float | None,
    width: float | None,
    spacing_length: float | None,
    spacing_width: float | None,
) -> int:
    """Number of cores on a rectangular grid, rounding partial rows up."""
    if not length or not width or not spacing_length or not spacing_width:
        return 0
    return math.ceil(length / spacing_length) * math.ceil(width / spacing_width)


def run_takeoff(request: TakeoffRequest) -> TakeoffResult:
    if request.mode == "sqft":
        value = square_feet(request.length, request.width)
    elif request.mode == "cubic_yards":
        value = cubic_yards(request.length, request.width, request.depth)
    elif request.mode == "inches":
        value = feet_to_inches(request.feet)
    else:
        value = grid_core_count(
            request.length, request.width, request.spacing_length, request.spacing_width
        )
    return TakeoffResult(mode=request.mode, value=value)


__all__ = [
    "TakeoffRequest",
    "TakeoffResult",
    "square_feet",
    "cubic_yards",
    "feet_to_inches",
    "grid_core_count",
    "run_takeoff",
]
