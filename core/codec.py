"""core/codec.py — Binary layout of a ``SaveRecord``.

Layout v1 (little-endian, no header, no version byte)::

    string  name            7-bit length prefix + UTF-8 bytes
    f64     size_exponent
    f64     water
    i32     tier_index
    i64     session_start   (ticks)
    i64     last_tick       (ticks)

The string prefix is the variable-length 7-bit integer used by .NET's
``BinaryWriter``: low 7 bits first, high bit set while more bytes follow.

Framing (length, hash, encryption) is the cipher layer's job.  A schema
change needs a new layout function, not a flag on this one.
"""

from __future__ import annotations
import struct

from core.record import SaveRecord


class RecordError(Exception):
    """Base class for every save-file failure."""


class MissingRecord(RecordError):
    """No readable save file at the given path."""


class CorruptRecord(RecordError):
    """Save file exists but fails decryption or the integrity check."""


class MalformedRecord(CorruptRecord):
    """Decrypted payload does not match the record layout."""


_NUMBERS = struct.Struct("<ddiqq")

_I32_MIN, _I32_MAX = -(1 << 31), (1 << 31) - 1
_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1

# 5 bytes carry 35 bits, enough for any int32 length
_MAX_PREFIX_BYTES = 5


def _write_7bit(out: bytearray, value: int) -> None:
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)


def _read_7bit(data: bytes, offset: int) -> tuple[int, int]:
    """Return (value, new_offset)."""
    value = 0
    shift = 0
    for i in range(_MAX_PREFIX_BYTES):
        if offset >= len(data):
            raise MalformedRecord("truncated string length prefix")
        b = data[offset]
        offset += 1
        value |= (b & 0x7F) << shift
        if not b & 0x80:
            return value, offset
        shift += 7
    raise MalformedRecord("string length prefix too long")


def encode_record(record: SaveRecord) -> bytes:
    """Serialize *record* to the v1 byte layout."""
    if not _I32_MIN <= record.tier_index <= _I32_MAX:
        raise ValueError(f"tier_index out of int32 range: {record.tier_index}")
    for label, ts in (("session_start", record.session_start),
                      ("last_tick", record.last_tick)):
        if not _I64_MIN <= ts <= _I64_MAX:
            raise ValueError(f"{label} out of int64 range: {ts}")

    name = record.name.encode("utf-8")
    out = bytearray()
    _write_7bit(out, len(name))
    out += name
    out += _NUMBERS.pack(
        float(record.size_exponent),
        float(record.water),
        int(record.tier_index),
        int(record.session_start),
        int(record.last_tick),
    )
    return bytes(out)


def decode_record(data: bytes) -> SaveRecord:
    """Parse the v1 byte layout.  Raises ``MalformedRecord``."""
    length, offset = _read_7bit(data, 0)
    if length > len(data) - offset:
        raise MalformedRecord(
            f"name length {length} exceeds remaining {len(data) - offset} bytes")
    try:
        name = data[offset:offset + length].decode("utf-8")
    except UnicodeDecodeError as ex:
        raise MalformedRecord(f"name is not valid UTF-8: {ex}") from ex
    offset += length

    remaining = len(data) - offset
    if remaining < _NUMBERS.size:
        raise MalformedRecord(
            f"expected {_NUMBERS.size} bytes of fields, found {remaining}")
    if remaining > _NUMBERS.size:
        raise MalformedRecord(f"{remaining - _NUMBERS.size} trailing bytes")

    size_exponent, water, tier_index, session_start, last_tick = \
        _NUMBERS.unpack_from(data, offset)
    return SaveRecord(
        name=name,
        size_exponent=size_exponent,
        water=water,
        tier_index=tier_index,
        session_start=session_start,
        last_tick=last_tick,
    )
