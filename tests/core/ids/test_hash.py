"""
Tests for the base36 hash codec.

These tests verify the SHA-256 digest extraction, base36 encoding, and the
truncate-or-pad behavior of base36_hash.
"""

import string

import pytest

from terseid.core.ids import base36_encode, base36_hash, compute_digest

BASE36 = set(string.digits + string.ascii_lowercase)

# SHA256("hello") = 2cf24dba5fb0a30e...; first 8 bytes as big-endian u64
HELLO_DIGEST = 0x2CF24DBA5FB0A30E


class TestComputeDigest:
    """Tests for compute_digest function."""

    def test_known_value(self) -> None:
        """Test digest of a known input."""
        assert compute_digest(b"hello") == HELLO_DIGEST
        assert compute_digest(b"hello") == 3238736544897475342

    def test_deterministic(self) -> None:
        """Test that the same input always yields the same digest."""
        assert compute_digest(b"test input") == compute_digest(b"test input")

    def test_fits_in_64_bits(self) -> None:
        """Test that digests are unsigned 64-bit values."""
        for seed in (b"", b"a", b"another seed"):
            assert 0 <= compute_digest(seed) < 2**64


class TestBase36Encode:
    """Tests for base36_encode function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (1, "1"),
            (35, "z"),
            (36, "10"),
            (1295, "zz"),
            (1296, "100"),
            (2**64 - 1, "3w5e11264sgsf"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        """Test encoding of boundary values."""
        assert base36_encode(value) == expected

    def test_round_trips_through_int(self) -> None:
        """Test that encodings decode back with int(..., 36)."""
        for value in (7, 12345, HELLO_DIGEST):
            assert int(base36_encode(value), 36) == value

    def test_lowercase_only(self) -> None:
        """Test that output uses only lowercase base36 characters."""
        encoded = base36_encode(2**64 - 1)
        assert set(encoded) <= BASE36

    def test_negative_rejected(self) -> None:
        """Test that negative values are rejected."""
        with pytest.raises(ValueError):
            base36_encode(-1)


class TestBase36Hash:
    """Tests for base36_hash function."""

    def test_exact_length(self) -> None:
        """Test that every length from 1 to 100 is honored exactly."""
        for length in range(1, 101):
            result = base36_hash(b"test", length)
            assert len(result) == length
            assert set(result) <= BASE36

    def test_truncation_keeps_leading_characters(self) -> None:
        """Test that short hashes are prefixes of the full encoding."""
        full = base36_encode(HELLO_DIGEST)
        assert base36_hash(b"hello", 5) == full[:5]
        assert base36_hash(b"hello", len(full)) == full

    def test_zero_padding(self) -> None:
        """Test that long hashes are left-padded with zeros."""
        full = base36_encode(HELLO_DIGEST)
        padded = base36_hash(b"hello", 20)
        assert padded == "0" * (20 - len(full)) + full

    def test_deterministic(self) -> None:
        """Test that identical inputs give identical hashes."""
        assert base36_hash(b"consistency test", 8) == base36_hash(b"consistency test", 8)

    def test_str_seed_is_utf8(self) -> None:
        """Test that str seeds hash like their UTF-8 bytes."""
        assert base36_hash("héllo", 8) == base36_hash("héllo".encode("utf-8"), 8)

    def test_different_seeds_differ(self) -> None:
        """Test that different seeds give different hashes."""
        assert base36_hash(b"seed1", 8) != base36_hash(b"seed2", 8)

    def test_valid_chars_across_seeds(self) -> None:
        """Test alphabet validity over many seeds."""
        for i in range(200):
            assert set(base36_hash(f"seed-{i}".encode(), 15)) <= BASE36
