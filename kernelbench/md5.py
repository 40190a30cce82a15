"""MD5 message digest, computed word by word over 512-bit chunks."""

from __future__ import annotations

import math
import struct

MASK32 = 0xFFFFFFFF
MSG_SIZE = 1000

# Sum of the four state words for the message bytes 0, 1, 2, ... of MSG_SIZE.
RESULT = 0x30C0DA225

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS: tuple[int, ...] = (
    (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4
)

# Binary integer part of the sines of 1..64 (in radians).
_K: tuple[int, ...] = tuple(int(abs(math.sin(i + 1)) * 2**32) & MASK32 for i in range(64))


def _rotate_left(x: int, c: int) -> int:
    return ((x << c) | (x >> (32 - c))) & MASK32


def _pad(data: bytes) -> bytes:
    """Append the 1 bit, zero bits and the 32-bit little-endian bit length."""
    length = len(data)
    new_len = (((length + 8) // 64) + 1) * 64 - 8
    bit_length = struct.pack("<I", (8 * length) & MASK32)
    return data + b"\x80" + bytes(new_len - length - 1) + bit_length + bytes(4)


def md5_words(data: bytes) -> tuple[int, int, int, int]:
    """Return the four 32-bit state words (h0, h1, h2, h3) after hashing data."""
    h0, h1, h2, h3 = _INITIAL_STATE
    message = _pad(bytes(data))
    for offset in range(0, len(message), 64):
        w = struct.unpack_from("<16I", message, offset)
        a, b, c, d = h0, h1, h2, h3
        for i in range(64):
            if i < 16:
                f = (b & c) | (~b & d)
                g = i
            elif i < 32:
                f = (d & b) | (~d & c)
                g = (5 * i + 1) % 16
            elif i < 48:
                f = b ^ c ^ d
                g = (3 * i + 5) % 16
            else:
                f = c ^ (b | (~d & MASK32))
                g = (7 * i) % 16
            f &= MASK32
            rotated = _rotate_left((a + f + _K[i] + w[g]) & MASK32, _SHIFTS[i])
            a, b, c, d = d, (b + rotated) & MASK32, b, c
        h0 = (h0 + a) & MASK32
        h1 = (h1 + b) & MASK32
        h2 = (h2 + c) & MASK32
        h3 = (h3 + d) & MASK32
    return h0, h1, h2, h3


def md5_digest(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of data."""
    return struct.pack("<4I", *md5_words(data))


def benchmark(rpt: int, length: int = MSG_SIZE) -> int:
    """Hash the message 0, 1, 2, ... of length bytes rpt times.

    Prints the hex digest after each run and returns the sum of the four
    state words of the last run.
    """
    message = bytes(i & 0xFF for i in range(length))
    words = _INITIAL_STATE
    for _ in range(rpt):
        words = md5_words(message)
        print(struct.pack("<4I", *words).hex())
    return sum(words)


def verify(result: int) -> bool:
    """Compare the summed state words with the known-good value."""
    return result == RESULT