"""Name normalisation and the 32-bit name hash used to key WDF archive entries."""

from __future__ import annotations

import struct

ANSI_ENCODING = "gbk"
MAX_NAME_BYTES = 256

_MASK = 0xFFFFFFFF
_TAIL_WORDS = (0x9BE74448, 0x66F42C48)
_ADJUST_TABLE = bytes.maketrans(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ/",
    b"abcdefghijklmnopqrstuvwxyz\\",
)


def to_bytes(name: str | bytes | bytearray) -> bytes:
    """Return the archive's byte form of a name, encoding text with the ANSI code page."""
    if isinstance(name, str):
        return name.encode(ANSI_ENCODING, errors="replace")
    return bytes(name)


def adjust_name(name: str | bytes | bytearray) -> bytes:
    """Lower-case ASCII letters and turn '/' into '\\', byte by byte."""
    return to_bytes(name).translate(_ADJUST_TABLE)


def _rol1(value: int) -> int:
    return ((value << 1) | (value >> 31)) & _MASK


def string_id(name: str | bytes | bytearray) -> int:
    """Hash a name to the 32-bit uid stored in the archive index.

    The name is used as given; callers normally pass it through
    :func:`adjust_name` first. Only the first 256 bytes take part,
    and a NUL byte ends the name.
    """
    data = to_bytes(name).split(b"\0", 1)[0][:MAX_NAME_BYTES]
    count = (len(data) + 3) // 4
    padded = data.ljust(count * 4, b"\0")
    words = list(struct.unpack(f"<{count}I", padded)) + list(_TAIL_WORDS)

    v = 0xF4FA8928
    esi = 0x37A8470E
    edi = 0x7758B42B
    for word in words:
        v = _rol1(v)
        ebx = 0x267B0B11 ^ v
        esi ^= word
        edi ^= word

        multiplier = (((ebx + edi) & _MASK) | 0x2040801) & 0xBFEF7FDF
        product = esi * multiplier
        low, high = product & _MASK, product >> 32
        total = low + high + (1 if high else 0)
        carry = total >> 32
        new_esi = ((total & _MASK) + carry) & _MASK

        multiplier = (((ebx + esi) & _MASK) | 0x804021) & 0x7DFEFBFF
        esi = new_esi
        product = edi * multiplier
        low, high = product & _MASK, product >> 32
        doubled = high * 2
        carry = doubled >> 32
        total = low + (doubled & _MASK) + carry
        eax = total & _MASK
        if total >> 32:
            eax = (eax + 2) & _MASK
        edi = eax

    return esi ^ edi