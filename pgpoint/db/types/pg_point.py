# pgpoint/db/types/pg_point.py
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.types import UserDefinedType

from pgpoint.geo.ewkt import SRID
from pgpoint.geo.point import NullPoint, Point


class GeometryPoint(UserDefinedType):
    """PostGIS geometry(Point,4326) column mapped to ``Point``.

    Writes EWKT text (PostgreSQL casts it to geometry), reads the hex EWKB
    PostGIS returns. Malformed column values raise.
    """
    cache_ok = True

    def get_col_spec(self, **kw) -> str:
        return f"geometry(Point,{SRID})"

    @property
    def python_type(self):
        return Point

    def bind_processor(self, dialect):
        def process(value: Optional[Point]) -> Optional[str]:
            if value is None:
                return None
            return value.value()

        return process

    def literal_processor(self, dialect):
        def process(value: Point) -> str:
            return "'" + value.value() + "'"

        return process

    def result_processor(self, dialect, coltype):
        def process(value: Any) -> Optional[Point]:
            if value is None:
                return None
            return Point.scan(value)

        return process


class NullableGeometryPoint(UserDefinedType):
    """Same column, mapped to ``NullPoint`` (NULL -> valid=False).

    strict=None follows PGPOINT_NULLPOINT_STRICT; with strict off malformed
    values are read back as NULL.
    """
    cache_ok = True

    def __init__(self, strict: Optional[bool] = None) -> None:
        self.strict = strict

    def get_col_spec(self, **kw) -> str:
        return f"geometry(Point,{SRID})"

    @property
    def python_type(self):
        return NullPoint

    def bind_processor(self, dialect):
        def process(value: NullPoint | Point | None) -> Optional[str]:
            # bare Point is accepted too; both expose value()
            if value is None:
                return None
            return value.value()

        return process

    def result_processor(self, dialect, coltype):
        strict = self.strict

        def process(value: Any) -> NullPoint:
            return NullPoint.scan(value, strict=strict)

        return process
