"""PostGIS EWKB point decoder.

Layout (after hex decoding)::

    byte 0        byte order: 0 = big-endian (XDR), 1 = little-endian (NDR)
    uint32        geometry type word; high bits carry the EWKB Z / M / SRID flags
    uint32        SRID, only when the SRID flag is set
    float64       X = longitude
    float64       Y = latitude

Anything after Y (Z / M ordinates) is ignored. The type code itself is not
checked; use ``read_header`` when a caller needs to insist on a point.
"""
from __future__ import annotations

import binascii
import struct
from dataclasses import dataclass
from typing import Optional, Tuple

from pgpoint.shared.errors import DecodeError, InvalidByteOrder, TruncatedInput

WKB_XDR = 0
WKB_NDR = 1

EWKB_Z_FLAG = 0x80000000
EWKB_M_FLAG = 0x40000000
EWKB_SRID_FLAG = 0x20000000

WKB_POINT = 1


@dataclass(frozen=True)
class EwkbHeader:
    byte_order: int
    geometry_type: int  # type word with flags stripped
    flags: int
    srid: Optional[int]
    offset: int  # first byte after the header

    @property
    def endian(self) -> str:
        return "<" if self.byte_order == WKB_NDR else ">"


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def seek(self, pos: int) -> None:
        self._pos = pos

    def read(self, fmt: str, what: str):
        size = struct.calcsize(fmt)
        end = self._pos + size
        if end > len(self._data):
            raise TruncatedInput(
                f"EWKB truncated while reading {what}: need {size} bytes at offset {self._pos}, "
                f"have {max(len(self._data) - self._pos, 0)}",
                details={"field": what, "offset": self._pos, "length": len(self._data)},
            )
        (value,) = struct.unpack_from(fmt, self._data, self._pos)
        self._pos = end
        return value


def unhex(text: str) -> bytes:
    try:
        # unhexlify, not bytes.fromhex: whitespace is not valid here
        return binascii.unhexlify(text)
    except ValueError as e:  # binascii.Error is a ValueError
        raise DecodeError(
            f"Invalid hex EWKB: {e}",
            details={"length": len(text)},
        ) from e


def read_header(data: bytes) -> EwkbHeader:
    r = _Reader(data)

    byte_order = r.read("B", "byte order")
    if byte_order not in (WKB_XDR, WKB_NDR):
        raise InvalidByteOrder(
            f"Invalid byte order {byte_order}",
            details={"byte_order": byte_order},
        )
    endian = "<" if byte_order == WKB_NDR else ">"

    type_word = r.read(endian + "I", "geometry type")
    flags = type_word & (EWKB_Z_FLAG | EWKB_M_FLAG | EWKB_SRID_FLAG)

    srid = None
    if flags & EWKB_SRID_FLAG:
        srid = r.read(endian + "I", "srid")

    return EwkbHeader(
        byte_order=byte_order,
        geometry_type=type_word & ~flags & 0xFFFFFFFF,
        flags=flags,
        srid=srid,
        offset=r.pos,
    )


def decode_ewkb(data: bytes) -> Tuple[float, float]:
    """Raw EWKB bytes -> (lat, lng)."""
    header = read_header(data)

    r = _Reader(data)
    r.seek(header.offset)
    x = r.read(header.endian + "d", "x ordinate")
    y = r.read(header.endian + "d", "y ordinate")
    return y, x


def decode_hex_ewkb(text: str) -> Tuple[float, float]:
    """Hex EWKB text (PostGIS text output) -> (lat, lng)."""
    return decode_ewkb(unhex(text))
