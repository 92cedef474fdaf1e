from .domains import (
    DecodeError,
    DomainError,
    InvalidByteOrder,
    JSONParseError,
    PointError,
    TruncatedInput,
    TypeMismatch,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "PointError",
    "DecodeError",
    "InvalidByteOrder",
    "TruncatedInput",
    "TypeMismatch",
    "JSONParseError",
]
