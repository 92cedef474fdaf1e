from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ColumnKind(StrEnum):
    NULL = "null"
    HEX = "hex"  # hex EWKB text (domyślne wyjście PostGIS)
    WKB = "wkb"  # surowe bajty EWKB (sterowniki w trybie binarnym)
    OTHER = "other"


@dataclass(frozen=True)
class ColumnValue:
    """Opaque driver value tagged with what it turned out to be.

    ``payload`` is ``str`` for HEX, ``bytes`` for WKB, ``None`` for NULL and
    the untouched input for OTHER.
    """

    kind: ColumnKind
    payload: Any = None


def classify(raw: Any) -> ColumnValue:
    """Tag a driver value.

    Byte strings starting with a control or non-ASCII byte are raw EWKB, so a
    bad byte order flag (b"\\x02...") is reported as InvalidByteOrder.
    Printable ASCII is taken as hex text; non-hex characters then fail with
    DecodeError.
    """
    if raw is None:
        return ColumnValue(ColumnKind.NULL)

    if isinstance(raw, str):
        return ColumnValue(ColumnKind.HEX, raw)

    if isinstance(raw, (bytes, bytearray, memoryview)):
        data = bytes(raw)
        # hex text always starts with an ASCII digit, raw EWKB with the byte order flag
        if data and (data[0] < 0x20 or data[0] >= 0x7F):
            return ColumnValue(ColumnKind.WKB, data)
        # latin-1 never fails; non-hex bytes surface later as DecodeError
        return ColumnValue(ColumnKind.HEX, data.decode("latin-1"))

    return ColumnValue(ColumnKind.OTHER, raw)
