"""Fixed-size Bloom filter for string keys."""

from .BitTable import BitTable
from .BloomFilter import BloomFilter
from .StringHash import bit_indices, high_sub_hash, low_sub_hash, string_hash

__all__ = [
    "BitTable",
    "BloomFilter",
    "bit_indices",
    "high_sub_hash",
    "low_sub_hash",
    "string_hash",
]
