# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle helpers shared by every reduction stage.

No external dependencies — only stdlib math.
"""
import math


def to_degrees(radians: float) -> float:
    """Convert an angle from radians to degrees."""
    return math.degrees(radians)


def to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return math.radians(degrees)


def limit_degrees_0_to_360(degrees: float) -> float:
    """
    Reduce an angle to the range [0, 360).

    Uses 360 * (x/360 - floor(x/360)) with a final correction for results
    that still fall outside the range after rounding. Angles already in
    range are returned unchanged, so the reduction is idempotent.
    """
    if 0.0 <= degrees < 360.0:
        return degrees

    turns = degrees / 360.0
    limited = 360.0 * (turns - math.floor(turns))
    if limited < 0.0:
        limited += 360.0
    if limited >= 360.0:
        limited -= 360.0
    return limited


def third_degree_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    """Evaluate a*x^3 + b*x^2 + c*x + d in Horner form."""
    return ((a * x + b) * x + c) * x + d
