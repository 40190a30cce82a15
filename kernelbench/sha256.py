"""SHA-256 message digest with incremental updates and truncated output."""

from __future__ import annotations

import struct
from collections.abc import Sequence

MASK32 = 0xFFFFFFFF
MASK64 = (1 << 64) - 1

DIGEST_SIZE = 32
BLOCK_SIZE = 64
DIGEST_WORDS = 8

MESSAGE = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"

EXPECTED_HASH = bytes(
    (
        0x24, 0x8D, 0x6A, 0x61, 0xD2, 0x06, 0x38, 0xB8, 0xE5, 0xC0, 0x26, 0x93,
        0x0C, 0x3E, 0x60, 0x39, 0xA3, 0x3C, 0xE4, 0x59, 0x64, 0xFF, 0x21, 0x67,
        0xF6, 0xEC, 0xED, 0xD4, 0x19, 0xDB, 0x06, 0xC1,
    )
)

_K: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_H0: tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotl(n: int, x: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK32


def _compress(state: list[int], block: bytes) -> None:
    """Process one 64-byte block, updating state in place."""
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x15 = w[i - 15]
        x2 = w[i - 2]
        s0 = _rotl(25, x15) ^ _rotl(14, x15) ^ (x15 >> 3)
        s1 = _rotl(15, x2) ^ _rotl(13, x2) ^ (x2 >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK32)

    a, b, c, d, e, f, g, h = state
    for k, data in zip(_K, w):
        big_s1 = _rotl(26, e) ^ _rotl(21, e) ^ _rotl(7, e)
        choice = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + choice + k + data) & MASK32
        big_s0 = _rotl(30, a) ^ _rotl(19, a) ^ _rotl(10, a)
        majority = (a & b) ^ (c & (a ^ b))
        t2 = (big_s0 + majority) & MASK32
        a, b, c, d, e, f, g, h = (t1 + t2) & MASK32, a, b, c, (d + t1) & MASK32, e, f, g

    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & MASK32


def write_be32(length: int, words: Sequence[int]) -> bytes:
    """Serialise words big-endian and return the first length bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    needed = (length + 3) // 4
    if needed > len(words):
        raise ValueError("not enough words for the requested length")
    packed = b"".join(struct.pack(">I", word & MASK32) for word in words[:needed])
    return packed[:length]


class Sha256:
    """Incremental SHA-256 hash context."""

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return the context to its initial state."""
        self._state = list(_H0)
        self._count = 0
        self._pending = bytearray()

    def update(self, data: bytes) -> None:
        """Feed more message bytes into the hash."""
        self._pending.extend(data)
        whole = len(self._pending) - len(self._pending) % BLOCK_SIZE
        for offset in range(0, whole, BLOCK_SIZE):
            _compress(self._state, bytes(self._pending[offset:offset + BLOCK_SIZE]))
            self._count += 1
        del self._pending[:whole]

    def digest(self, length: int = DIGEST_SIZE) -> bytes:
        """Finish the hash, return its first length bytes and reset the context."""
        if not 0 <= length <= DIGEST_SIZE:
            raise ValueError(f"digest length must be between 0 and {DIGEST_SIZE}")
        index = len(self._pending)
        block = bytearray(self._pending)
        block.append(0x80)
        if len(block) > BLOCK_SIZE - 8:
            block.extend(bytes(BLOCK_SIZE - len(block)))
            _compress(self._state, bytes(block))
            block = bytearray()
        block.extend(bytes(BLOCK_SIZE - 8 - len(block)))
        bit_count = ((self._count << 9) | (index << 3)) & MASK64
        block.extend(struct.pack(">Q", bit_count))
        _compress(self._state, bytes(block))
        result = write_be32(length, self._state)
        self.reset()
        return result


def sha256(data: bytes) -> bytes:
    """Return the full 32-byte SHA-256 digest of data."""
    return Sha256(data).digest()


def benchmark(rpt: int) -> bytes:
    """Hash the fixed message rpt times and return the last digest."""
    buffer = bytes(DIGEST_SIZE)
    for _ in range(rpt):
        ctx = Sha256()
        ctx.update(MESSAGE)
        buffer = ctx.digest(Sha256.digest_size)
    return buffer


def verify(digest: bytes) -> bool:
    """Compare the leading eight bytes of digest with the known hash."""
    return bytes(digest[:DIGEST_WORDS]) == EXPECTED_HASH[:DIGEST_WORDS]