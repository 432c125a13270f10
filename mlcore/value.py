"""Value: a small piece of typed data for properties and messages."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from mlcore.path import Path
from mlcore.symbol import Symbol

BLOB_SIZE_BYTES = 512
_U32_MAX = 0xFFFFFFFF


def _f32(x: float) -> float:
    """Round x to the nearest single-precision float."""
    if math.isnan(x) or math.isinf(x):
        return x
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


class ValueType(IntEnum):
    """The kinds of data a Value can hold."""

    UNDEFINED = 0
    FLOAT = 1
    TEXT = 2
    BLOB = 3
    UNSIGNED_LONG = 5


_TYPE_NAMES = {
    ValueType.UNDEFINED: "undefined",
    ValueType.FLOAT: "float",
    ValueType.TEXT: "text",
    ValueType.BLOB: "blob",
    ValueType.UNSIGNED_LONG: "unsignedlong",
}


class Value:
    """Undefined, a single-precision float, text, an unsigned 32-bit number or a blob.

    Numbers and booleans become floats. A sequence of no numbers is
    undefined and a sequence of one number is that number.
    """

    __slots__ = ("_type", "_float", "_text", "_ulong", "_blob")

    def __init__(self, data: object = None) -> None:
        self._type = ValueType.UNDEFINED
        self._float = 0.0
        self._text = ""
        self._ulong = 0
        self._blob = b""
        if data is None:
            return
        if isinstance(data, Value):
            self._copy_from(data)
        elif isinstance(data, (bool, int, float)):
            self._type = ValueType.FLOAT
            self._float = _f32(float(data))
        elif isinstance(data, Symbol):
            self._type = ValueType.TEXT
            self._text = data.text
        elif isinstance(data, str):
            self._type = ValueType.TEXT
            self._text = data
        elif isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
            if len(data) == 0:
                return
            if len(data) == 1:
                self._copy_from(Value(float(data[0])))
                return
            raise ValueError("a Value holds at most one number")
        else:
            raise TypeError(f"cannot make a Value from {type(data).__name__}")

    def _copy_from(self, other: Value) -> None:
        self._type = other._type
        self._float = other._float
        self._text = other._text
        self._ulong = other._ulong
        self._blob = other._blob

    @classmethod
    def unsigned_long(cls, n: int) -> Value:
        """Make a Value holding an unsigned 32-bit number."""
        n = int(n)
        if not 0 <= n <= _U32_MAX:
            raise ValueError("unsigned long value out of range")
        v = cls()
        v._type = ValueType.UNSIGNED_LONG
        v._ulong = n
        return v

    @classmethod
    def blob(cls, data: bytes | bytearray) -> Value:
        """Make a Value holding a copy of up to 512 bytes."""
        raw = bytes(data)
        if len(raw) > BLOB_SIZE_BYTES:
            raise ValueError(f"blob is larger than {BLOB_SIZE_BYTES} bytes")
        v = cls()
        v._type = ValueType.BLOB
        v._blob = raw
        return v

    @property
    def type(self) -> ValueType:
        """The kind of data held."""
        return self._type

    def get_float(self, default: float | None = None) -> float:
        """Return the float; without a default this is 0.0 for non-float values."""
        if default is None or self._type == ValueType.FLOAT:
            return self._float
        return default

    def get_bool(self, default: bool | None = None) -> bool:
        """Return the float as a bool, or default if the value is not a float."""
        if default is None or self._type == ValueType.FLOAT:
            return bool(self._float)
        return default

    def get_int(self, default: int | None = None) -> int:
        """Return the float truncated to an int, or default if not a float."""
        if default is None or self._type == ValueType.FLOAT:
            if not math.isfinite(self._float):
                raise ValueError("cannot convert a non-finite value to int")
            return int(self._float)
        return default

    def get_text(self, default: str | None = None) -> str:
        """Return the text, or default (empty text if none) if not text."""
        if self._type == ValueType.TEXT:
            return self._text
        return "" if default is None else default

    def get_unsigned_long(self, default: int | None = None) -> int:
        """Return the unsigned number; without a default this is 0 for other types."""
        if default is None or self._type == ValueType.UNSIGNED_LONG:
            return self._ulong
        return default

    def get_blob(self) -> bytes:
        """Return the blob bytes, or empty bytes if not a blob."""
        return self._blob if self._type == ValueType.BLOB else b""

    def type_symbol(self) -> Symbol:
        """Return the name of the value's type as a symbol."""
        return Symbol(_TYPE_NAMES[self._type])

    def _key(self) -> tuple:
        match self._type:
            case ValueType.FLOAT:
                return (self._type, self._float)
            case ValueType.TEXT:
                return (self._type, self._text)
            case ValueType.UNSIGNED_LONG:
                return (self._type, self._ulong)
            case ValueType.BLOB:
                return (self._type, self._blob)
            case _:
                return (self._type,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self._type != other._type:
            return False
        # Blobs never compare equal.
        if self._type == ValueType.BLOB:
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        return self._type != ValueType.UNDEFINED

    def __str__(self) -> str:
        match self._type:
            case ValueType.FLOAT:
                return f"{self._float:g}"
            case ValueType.TEXT:
                return self._text
            case ValueType.UNSIGNED_LONG:
                return str(self._ulong)
            case ValueType.BLOB:
                return "[blob]"
            case _:
                return "[undefined]"

    def __repr__(self) -> str:
        if self._type == ValueType.UNDEFINED:
            return "Value()"
        if self._type == ValueType.UNSIGNED_LONG:
            return f"Value.unsigned_long({self._ulong})"
        if self._type == ValueType.BLOB:
            return f"Value.blob({self._blob!r})"
        payload = self._float if self._type == ValueType.FLOAT else self._text
        return f"Value({payload!r})"


@dataclass
class NamedValue:
    """A path paired with a value, for building trees from lists."""

    name: Path = field(default_factory=Path)
    value: Value = field(default_factory=Value)