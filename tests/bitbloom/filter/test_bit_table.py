"""Tests for BitTable bit addressing and population count."""

import pytest
from bitbloom.filter import BitTable


class TestBitTableValid:
    """Tests for valid BitTable operations."""

    def test_fresh_table_is_empty(self):
        """Test that a new table has 1024 zero words."""
        table = BitTable()

        assert len(table) == 65536
        assert len(table.words) == 1024
        assert table.popcount() == 0
        assert not any(table.words)

    def test_set_addresses_word_and_bit(self):
        """Test that idx maps to word idx // 64, bit idx % 64."""
        table = BitTable()
        table.set(0)
        table.set(65)
        table.set(65535)

        words = table.words
        assert words[0] == 1
        assert words[1] == 1 << 1
        assert words[1023] == 1 << 63
        assert table.popcount() == 3

    def test_set_reports_new_bits(self):
        """Test that set() is idempotent and reports whether it changed anything."""
        table = BitTable()

        assert table.set(4242) is True
        assert table.set(4242) is False
        assert table.popcount() == 1

    def test_test_reads_back_set_bits(self):
        """Test that test() only reports bits that were set."""
        table = BitTable()
        table.set(100)

        assert table.test(100)
        assert not table.test(99)
        assert not table.test(101)

    def test_full_table_popcount(self):
        """Test popcount when every bit is set."""
        table = BitTable()
        for idx in range(len(table)):
            table.set(idx)

        assert table.popcount() == 65536
        assert all(word == 2**64 - 1 for word in table.words)

    def test_fingerprint_tracks_contents(self):
        """Test that equal tables share a fingerprint and different ones don't."""
        a, b = BitTable(), BitTable()
        assert a.fingerprint() == b.fingerprint()

        a.set(7)
        assert a.fingerprint() != b.fingerprint()

        b.set(7)
        assert a.fingerprint() == b.fingerprint()

    def test_words_is_a_snapshot(self):
        """Test that the words property doesn't expose the backing storage."""
        table = BitTable()
        snapshot = table.words
        table.set(0)

        assert snapshot[0] == 0
        assert table.words[0] == 1


class TestBitTableInvalid:
    """Tests for invalid BitTable access."""

    @pytest.mark.parametrize("idx", [-1, 65536, 10**9])
    def test_index_out_of_range(self, idx):
        """Test that out-of-range indices are rejected."""
        table = BitTable()

        with pytest.raises(IndexError, match="Bit index out of range"):
            table.set(idx)
        with pytest.raises(IndexError, match="Bit index out of range"):
            table.test(idx)

    @pytest.mark.parametrize("idx", [1.0, "1", True])
    def test_non_int_index(self, idx):
        """Test that non-integer indices are rejected."""
        with pytest.raises(TypeError, match="Bit index must be int"):
            BitTable().set(idx)
