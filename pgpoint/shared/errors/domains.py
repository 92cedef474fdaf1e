from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DomainError(Exception):
    """Bazowy błąd domenowy pgpoint.

    Każdy błąd niesie stabilny ``code`` (do logów i mapowania na odpowiedzi API)
    oraz opcjonalne ``details`` z kontekstem diagnostycznym.
    """

    message: str
    code: str = "domain_error"
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(DomainError):
    code: str = "validation_error"


@dataclass(frozen=True)
class PointError(DomainError):
    """Errors raised while scanning or parsing a point value."""

    code: str = "point_error"


@dataclass(frozen=True)
class DecodeError(PointError):
    """Input is not valid hex text."""

    code: str = "decode_error"


@dataclass(frozen=True)
class InvalidByteOrder(PointError):
    code: str = "invalid_byte_order"


@dataclass(frozen=True)
class TruncatedInput(PointError):
    """Fewer bytes left than the EWKB layout requires."""

    code: str = "truncated_input"


@dataclass(frozen=True)
class TypeMismatch(PointError):
    """Scan input is not a str / bytes-like column value."""

    code: str = "type_mismatch"


@dataclass(frozen=True)
class JSONParseError(PointError):
    code: str = "json_parse_error"
