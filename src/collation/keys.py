"""Collation keys.

A key is the canonical form encoded one byte per character: the low 8 bits
of each code point. Characters above U+00FF therefore collide with Latin-1
characters (U+0161 "š" and U+0061 "a" share byte 0x61). This is a known
limitation of the encoding and is kept as is, since changing it would change
collation results.

Keys order by unsigned byte-wise lexicographic comparison, a strict prefix
sorting first. Equality and hashing ignore the original string.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def encode(canonical: str) -> bytes:
    return bytes(ord(ch) & 0xFF for ch in canonical)


def compare_bytes(a: bytes, b: bytes) -> int:
    # bytes comparison in Python is already unsigned and prefix-first.
    return (a > b) - (a < b)


@dataclass(frozen=True, order=True, repr=False)
class CollationKey:
    original_string: str = field(compare=False)
    key_bytes: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.original_string, str):
            raise TypeError(f"original_string must be str, got {type(self.original_string).__name__}")
        if not isinstance(self.key_bytes, (bytes, bytearray, memoryview)):
            raise TypeError(f"key_bytes must be bytes-like, got {type(self.key_bytes).__name__}")
        # Own a private copy; a caller's bytearray may be mutated later.
        object.__setattr__(self, "key_bytes", bytes(self.key_bytes))

    def compare_to(self, other: "CollationKey") -> int:
        if not isinstance(other, CollationKey):
            raise TypeError(f"cannot compare CollationKey with {type(other).__name__}")
        return compare_keys(self, other)

    def __repr__(self) -> str:
        return f"CollationKey(string={self.original_string!r})"


def compare_keys(a: CollationKey, b: CollationKey) -> int:
    """Return -1, 0 or 1."""
    return compare_bytes(a.key_bytes, b.key_bytes)
