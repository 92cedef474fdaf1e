from pgpoint.geo.ewkt import SRID
from pgpoint.geo.point import NullPoint, Point
from pgpoint.shared.errors import (
    DecodeError,
    InvalidByteOrder,
    JSONParseError,
    PointError,
    TruncatedInput,
    TypeMismatch,
    ValidationError,
)

__all__ = [
    "SRID",
    "Point",
    "NullPoint",
    "PointError",
    "DecodeError",
    "InvalidByteOrder",
    "TruncatedInput",
    "TypeMismatch",
    "JSONParseError",
    "ValidationError",
]
