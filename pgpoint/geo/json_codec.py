from __future__ import annotations

import json
from typing import Any

import pydantic

from pgpoint.geo.ewkt import format_float
from pgpoint.geo.point import NullPoint, Point
from pgpoint.geo.schemas import PointJson
from pgpoint.shared.errors import JSONParseError


def point_to_json(p: Point) -> str:
    """{"lat":..,"lng":..} with the same plain shortest numbers as EWKT (2.0 -> 2)."""
    fields = PointJson.model_construct(lat=float(p.lat), lng=float(p.lng)).model_dump()
    # format_float rejects NaN / inf, which JSON cannot carry
    body = ",".join(f"{json.dumps(k)}:{format_float(v)}" for k, v in fields.items())
    return "{" + body + "}"


def null_point_to_json(np: NullPoint) -> str:
    if not np.valid:
        return "null"
    return point_to_json(np.point)


def _loads(data: str | bytes) -> Any:
    try:
        # integers widen to float; keeps "-0" negative and big integral values exact
        return json.loads(data, parse_int=float)
    except (TypeError, ValueError) as e:  # JSONDecodeError, UnicodeDecodeError
        raise JSONParseError(f"Invalid JSON: {e}") from e


def _point_from_obj(obj: Any) -> Point:
    try:
        parsed = PointJson.model_validate(obj)
    except pydantic.ValidationError as e:
        raise JSONParseError(
            "Invalid point JSON, expected {\"lat\": <number>, \"lng\": <number>}",
            details={"errors": e.errors(include_url=False)},
        ) from e
    return Point(lat=parsed.lat, lng=parsed.lng)


def point_from_json(data: str | bytes) -> Point:
    return _point_from_obj(_loads(data))


def null_point_from_json(data: str | bytes) -> NullPoint:
    """JSON -> NullPoint.

    ``null`` is an absent point (valid=False, no error). Any other malformed
    input raises JSONParseError; unlike NullPoint.scan nothing is swallowed here.
    """
    obj = _loads(data)
    if obj is None:
        return NullPoint.null()
    return NullPoint.of(_point_from_obj(obj))
