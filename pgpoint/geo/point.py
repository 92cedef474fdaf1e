from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pgpoint.app.config import get_settings
from pgpoint.geo.column_value import ColumnKind, classify
from pgpoint.geo.ewkb import decode_ewkb, decode_hex_ewkb
from pgpoint.geo.ewkt import format_ewkt
from pgpoint.shared.errors import PointError, TypeMismatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """PostGIS POINT in WGS-84.

    Stored as POINT(x y) = POINT(lng lat). No range checks: out-of-range
    coordinates coming from the database are passed through as they are.
    """

    lat: float = 0.0
    lng: float = 0.0

    def __str__(self) -> str:
        return format_ewkt(self.lat, self.lng)

    @classmethod
    def scan(cls, raw: Any) -> "Point":
        """Decode a driver column value (hex EWKB text or raw EWKB bytes)."""
        cv = classify(raw)

        if cv.kind == ColumnKind.HEX:
            lat, lng = decode_hex_ewkb(cv.payload)
        elif cv.kind == ColumnKind.WKB:
            lat, lng = decode_ewkb(cv.payload)
        else:
            raise TypeMismatch(
                f"Cannot scan {type(raw).__name__} into Point",
                details={"kind": str(cv.kind), "type": type(raw).__name__},
            )

        return cls(lat=lat, lng=lng)

    def value(self) -> str:
        """Bindable driver value: EWKT text, cast to geometry by PostgreSQL."""
        return str(self)

    def to_json(self) -> str:
        from pgpoint.geo.json_codec import point_to_json

        return point_to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Point":
        from pgpoint.geo.json_codec import point_from_json

        return point_from_json(data)


@dataclass(frozen=True)
class NullPoint:
    """Point that may be SQL NULL.

    When ``valid`` is False the ``point`` field carries no meaning and readers
    must ignore it.
    """

    point: Point = field(default_factory=Point)
    valid: bool = False

    @classmethod
    def null(cls) -> "NullPoint":
        return cls(point=Point(), valid=False)

    @classmethod
    def of(cls, point: Point) -> "NullPoint":
        return cls(point=point, valid=True)

    @classmethod
    def scan(cls, raw: Any, *, strict: Optional[bool] = None) -> "NullPoint":
        """Decode a nullable column value.

        UWAGA: without ``strict`` a value that fails to decode is reported as
        NULL, not as an error. Malformed data then looks exactly like missing
        data. Pass ``strict=True`` (or set PGPOINT_NULLPOINT_STRICT=1) to get
        the decode error instead.

        Settings are only read when a value fails to decode; a broken
        PGPOINT_ENV_FILE then fails fast with FileNotFoundError.
        """
        if raw is None:
            return cls.null()

        try:
            point = Point.scan(raw)
        except PointError as e:
            settings = get_settings()
            if strict is None:
                strict = settings.nullpoint_strict
            if strict:
                raise
            if settings.log_scan_failures:
                logger.warning("NullPoint scan failed, treating value as NULL: %s (%s)", e, e.code)
            return cls.null()

        return cls.of(point)

    def value(self) -> Optional[str]:
        if not self.valid:
            return None
        return self.point.value()

    def to_json(self) -> str:
        from pgpoint.geo.json_codec import null_point_to_json

        return null_point_to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> "NullPoint":
        from pgpoint.geo.json_codec import null_point_from_json

        return null_point_from_json(data)
