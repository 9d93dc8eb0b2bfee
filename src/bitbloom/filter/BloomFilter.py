import logging
from typing import Iterable

from .BitTable import BitTable
from .StringHash import bit_indices

logger = logging.getLogger(__name__)


class BloomFilter:
    """
    Probabilistic set membership for string keys.

    False positives are possible, false negatives are not. Each key is
    hashed once; the low and high 16 bits of that hash each address one
    bit of a fixed 65,536-bit table. A key "might be present" only when
    both of its bits are set.

    Not thread-safe: add() mutates the table, so concurrent callers need
    their own lock.

    Example:
        seen = BloomFilter()
        seen.add("example.com")
        if "example.com" in seen:
            # Might have been added
        else:
            # Definitely never added
    """

    # Bits checked per key
    NUM_HASHES = 2

    def __init__(self) -> None:
        self._table = BitTable()
        logger.debug("Created bloom filter with %d bits", len(self._table))

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "BloomFilter":
        """Create a bloom filter and add every key from an iterable."""
        bloom = cls()
        bloom.update(keys)
        return bloom

    @property
    def size_bits(self) -> int:
        return len(self._table)

    def add(self, key: str) -> None:
        low, high = bit_indices(key)
        self._table.set(low)
        self._table.set(high)

    def update(self, keys: Iterable[str]) -> None:
        """Add each key from an iterable."""
        count = 0
        for key in keys:
            self.add(key)
            count += 1
        logger.debug(
            "Added %d keys to bloom filter (fill ratio %.4f)",
            count,
            self.fill_ratio(),
        )

    def might_contain(self, key: str) -> bool:
        low, high = bit_indices(key)
        return self._table.test(low) and self._table.test(high)

    def __contains__(self, key: str) -> bool:
        return self.might_contain(key)

    def true_bits(self) -> int:
        """
        Number of bits set in the table.

        The closer this gets to size_bits, the more likely a key that was
        never added is reported as present.
        """
        return self._table.popcount()

    def fill_ratio(self) -> float:
        return self.true_bits() / self.size_bits

    def estimated_false_positive_rate(self) -> float:
        """Chance that an unseen key hits set bits in both positions."""
        return self.fill_ratio() ** self.NUM_HASHES

    def fingerprint(self) -> int:
        """Digest of the table contents; equal filters have equal fingerprints."""
        return self._table.fingerprint()

    def __repr__(self) -> str:
        return f"<BloomFilter bits: {self.size_bits}, true_bits: {self.true_bits()}>"
