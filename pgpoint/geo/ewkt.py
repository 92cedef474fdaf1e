from __future__ import annotations

import math
from decimal import Decimal

from pgpoint.shared.errors import ValidationError

# WGS-84; stały, nie czytamy go z EWKB
SRID = 4326


def format_float(v: float) -> str:
    """Shortest round-trip decimal form of ``v`` in plain notation.

    ``repr`` already gives the shortest digits; we only undo its scientific
    notation and drop the trailing ``.0`` of integral values (2.0 -> "2").
    """
    if not math.isfinite(v):
        raise ValidationError(
            f"Cannot format non-finite coordinate: {v!r}",
            details={"value": repr(v)},
        )

    s = repr(float(v))
    if "e" in s or "E" in s:
        s = format(Decimal(s), "f")
    if s.endswith(".0"):
        s = s[:-2]
    return s


def format_ewkt(lat: float, lng: float) -> str:
    # POINT(x y) = POINT(lng lat)
    return f"SRID={SRID};POINT({format_float(lng)} {format_float(lat)})"
