from array import array
import sys
from typing import ClassVar

import xxhash


class BitTable:
    """
    Fixed-length bit array packed into unsigned 64-bit words.

    Layout:
    ┌──────────┬──────────┬─────┬──────────┐
    │ word 0   │ word 1   │ ... │ word 1023│
    │ bits 0-63│ 64-127   │     │ ...65535 │
    └──────────┴──────────┴─────┴──────────┘
    Bit idx lives in word idx // 64 at position idx % 64 (LSB first).

    Bits are only ever set, never cleared, so popcount() is monotonic.
    """

    WORD_BITS: ClassVar[int] = 64
    NUM_WORDS: ClassVar[int] = 1024
    SIZE_BITS: ClassVar[int] = WORD_BITS * NUM_WORDS  # 65536

    def __init__(self) -> None:
        self._words = array("Q", bytes(8 * self.NUM_WORDS))

    def __len__(self) -> int:
        return self.SIZE_BITS

    @property
    def words(self) -> tuple[int, ...]:
        """Snapshot of the backing words."""
        return tuple(self._words)

    def set(self, idx: int) -> bool:
        """
        Set bit idx to 1.

        Returns:
            True if the bit was previously 0, False if it was already set.
        """
        word, mask = self._locate(idx)
        if self._words[word] & mask:
            return False
        self._words[word] |= mask
        return True

    def test(self, idx: int) -> bool:
        word, mask = self._locate(idx)
        return (self._words[word] & mask) != 0

    def popcount(self) -> int:
        """Number of 1-bits across the whole table."""
        return sum(word.bit_count() for word in self._words)

    def fingerprint(self) -> int:
        """xxh64 digest of the words (little-endian), for comparing table states."""
        words = self._words
        if sys.byteorder == "big":
            words = array("Q", words)
            words.byteswap()
        return xxhash.xxh64(words.tobytes()).intdigest()

    def _locate(self, idx: int) -> tuple[int, int]:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise TypeError(f"Bit index must be int, got {type(idx).__name__}")
        if not 0 <= idx < self.SIZE_BITS:
            raise IndexError(
                f"Bit index out of range: {idx} not in [0, {self.SIZE_BITS})"
            )
        return idx // self.WORD_BITS, 1 << (idx % self.WORD_BITS)
