"""wire.py: primitives of the Java DataInput/DataOutput binary format.

ServerAddress records are written with these so they stay byte-compatible
with records persisted by JVM services: a modified-UTF-8 string behind an
unsigned 16-bit big-endian length, and signed 32-bit big-endian integers.
"""
import struct
from typing import BinaryIO

from .errors import SerializationError, TruncatedRecordError

MAX_UTF_LENGTH: int = 0xFFFF
INT32_MIN: int = -(2 ** 31)
INT32_MAX: int = 2 ** 31 - 1

_UINT16 = struct.Struct(">H")
_INT32 = struct.Struct(">i")


def encode_modified_utf8(text: str) -> bytes:
    """Encodes text the way java.io.DataOutput.writeUTF does.

    Differs from standard UTF-8 in two places: U+0000 is written as the two
    bytes ``C0 80``, and characters outside the BMP are written as a UTF-16
    surrogate pair with each half taking three bytes.

    Args:
        text: the string to encode.

    Returns:
        bytes: the payload, without the length prefix.
    """
    out = bytearray()
    for char in text:
        code = ord(char)
        if code == 0:
            out += b"\xc0\x80"
        elif code > 0xFFFF:
            code -= 0x10000
            high = 0xD800 | (code >> 10)
            low = 0xDC00 | (code & 0x3FF)
            out += chr(high).encode("utf-8", "surrogatepass")
            out += chr(low).encode("utf-8", "surrogatepass")
        else:
            out += char.encode("utf-8", "surrogatepass")
    return bytes(out)


def decode_modified_utf8(data: bytes) -> str:
    """Decodes a modified-UTF-8 payload back into a string.

    Args:
        data: the payload, without the length prefix.

    Returns:
        str: the decoded text. Surrogate pairs are joined back into single
            characters.

    Raises:
        SerializationError: on a byte sequence java.io.DataInput.readUTF
            would reject.
    """
    units = []
    i = 0
    end = len(data)
    while i < end:
        first = data[i]
        if first < 0x80:
            units.append(first)
            i += 1
        elif first >> 5 == 0b110:
            if i + 1 >= end:
                raise SerializationError("partial character at end of string")
            second = data[i + 1]
            if second >> 6 != 0b10:
                raise SerializationError(f"malformed input around byte {i}")
            units.append(((first & 0x1F) << 6) | (second & 0x3F))
            i += 2
        elif first >> 4 == 0b1110:
            if i + 2 >= end:
                raise SerializationError("partial character at end of string")
            second, third = data[i + 1], data[i + 2]
            if second >> 6 != 0b10 or third >> 6 != 0b10:
                raise SerializationError(f"malformed input around byte {i}")
            units.append(((first & 0x0F) << 12) | ((second & 0x3F) << 6)
                         | (third & 0x3F))
            i += 3
        else:
            raise SerializationError(f"malformed input around byte {i}")
    text = "".join(chr(unit) for unit in units)
    return text.encode("utf-16-be", "surrogatepass").decode(
        "utf-16-be", "surrogatepass")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) < size:
        got = 0 if data is None else len(data)
        raise TruncatedRecordError(f"expected {size} bytes, got {got}")
    return data


def write_utf(stream: BinaryIO, text: str) -> None:
    """Writes a length-prefixed modified-UTF-8 string.

    Raises:
        SerializationError: if the encoded string is longer than 65535 bytes.
    """
    payload = encode_modified_utf8(text)
    if len(payload) > MAX_UTF_LENGTH:
        raise SerializationError(
            f"encoded string too long: {len(payload)} bytes")
    stream.write(_UINT16.pack(len(payload)))
    stream.write(payload)


def read_utf(stream: BinaryIO) -> str:
    """Reads a string written by :func:`write_utf`."""
    (length,) = _UINT16.unpack(_read_exact(stream, _UINT16.size))
    return decode_modified_utf8(_read_exact(stream, length))


def write_int(stream: BinaryIO, value: int) -> None:
    """Writes a signed 32-bit big-endian integer."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise SerializationError(f"{value} does not fit in 32 bits")
    stream.write(_INT32.pack(value))


def read_int(stream: BinaryIO) -> int:
    """Reads a signed 32-bit big-endian integer."""
    (value,) = _INT32.unpack(_read_exact(stream, _INT32.size))
    return value
