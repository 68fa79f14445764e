"""
Binary Stream Helpers

Little-endian int32 values and length-prefixed UTF-8 strings, where the
prefix is the byte count as a 7-bit varint (low group first).
"""

import struct
from typing import BinaryIO

from ..exceptions import CorruptDataError

_INT32 = struct.Struct('<i')
_MAX_VARINT_BYTES = 5


def write_int32(stream: BinaryIO, value: int) -> None:
    stream.write(_INT32.pack(value))


def write_string(stream: BinaryIO, value: str) -> None:
    encoded = value.encode('utf-8')
    length = len(encoded)
    prefix = bytearray()
    while length >= 0x80:
        prefix.append((length & 0x7F) | 0x80)
        length >>= 7
    prefix.append(length)
    stream.write(bytes(prefix))
    stream.write(encoded)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise CorruptDataError(f"Unexpected end of data while reading {what}: "
                               f"needed {size} bytes, got {len(data)}")
    return data


def read_int32(stream: BinaryIO, what: str = "int32") -> int:
    return _INT32.unpack(_read_exact(stream, _INT32.size, what))[0]


def read_string(stream: BinaryIO) -> str:
    length = 0
    shift = 0
    for _ in range(_MAX_VARINT_BYTES):
        byte = _read_exact(stream, 1, "string length")[0]
        length |= (byte & 0x7F) << shift
        if not byte & 0x80:
            break
        shift += 7
    else:
        raise CorruptDataError("String length prefix is too long")

    raw = _read_exact(stream, length, "string data")
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CorruptDataError(f"String is not valid UTF-8: {e}") from e
