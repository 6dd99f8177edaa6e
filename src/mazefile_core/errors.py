"""Typed failures raised while parsing or writing a Mazefile."""
from __future__ import annotations


class FormatError(ValueError):
    """Base class for every Mazefile format violation.

    ``field`` names the wire field being read (or the entity attribute being
    checked on encode) and ``offset`` is the byte offset of that field, or
    ``None`` when no stream position applies.
    """

    code = "E_FORMAT"

    def __init__(self, reason: str, *, field: str | None = None, offset: int | None = None):
        self.reason = reason
        self.field = field
        self.offset = offset
        super().__init__(self._render())

    def _render(self) -> str:
        where = []
        if self.field is not None:
            where.append(f"field={self.field}")
        if self.offset is not None:
            where.append(f"offset={self.offset}")
        if not where:
            return self.reason
        return f"{self.reason} ({' '.join(where)})"


class BadMagic(FormatError):
    code = "E_BAD_MAGIC"


class UnknownType(FormatError):
    code = "E_UNKNOWN_TYPE"


class Truncated(FormatError):
    """Stream ended before a declared or implied length."""

    code = "E_TRUNCATED"

    def __init__(self, field: str, offset: int, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated {field}: need {needed} bytes, {available} available",
            field=field,
            offset=offset,
        )


class InconsistentOffset(FormatError):
    code = "E_INCONSISTENT_OFFSET"


class InvalidTopology(FormatError):
    code = "E_INVALID_TOPOLOGY"


class OutOfBounds(FormatError):
    code = "E_OUT_OF_BOUNDS"


class TrailingBytes(FormatError):
    code = "E_TRAILING_BYTES"


class ReservedBits(FormatError):
    code = "E_RESERVED_BITS"
