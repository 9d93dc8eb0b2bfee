import struct

LOW_MASK = 0x0000FFFF
HIGH_MASK = 0xFFFF0000

_UINT32_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def string_hash(key: str) -> int:
    """
    Polynomial string hash with signed 32-bit wraparound.

    hash = c0*31^(n-1) + c1*31^(n-2) + ... + c(n-1)

    Characters are UTF-16 code units, so a code point above U+FFFF
    contributes its surrogate pair. Overflow wraps like a two's-complement
    32-bit integer, and the result is returned signed.

    Example:
        string_hash("")       # 0
        string_hash("hello")  # 99162322
    """
    if not isinstance(key, str):
        raise TypeError(f"Key must be str, got {type(key).__name__}")

    # surrogatepass keeps lone surrogates as their own code unit
    data = key.encode("utf-16-be", "surrogatepass")

    h = 0
    for (unit,) in struct.iter_unpack(">H", data):
        h = (31 * h + unit) & _UINT32_MASK

    return h - (1 << 32) if h & _SIGN_BIT else h


def low_sub_hash(h: int) -> int:
    """Low-order 16 bits of a 32-bit hash, in [0, 65535]."""
    return h & LOW_MASK


def high_sub_hash(h: int) -> int:
    """High-order 16 bits of a 32-bit hash, unsigned, in [0, 65535]."""
    # Masking first makes the shift logical even for negative hashes
    return (h & HIGH_MASK) >> 16


def bit_indices(key: str) -> tuple[int, int]:
    """Return the (low, high) bit indices a key addresses."""
    h = string_hash(key)
    return low_sub_hash(h), high_sub_hash(h)
