"""
Tests for ID parser and validator.

These tests verify that the parser splits IDs at the right dash, enforces
the hash rules, parses child paths, and reports failures uniformly.
"""

import pytest

from terseid.core.ids import (
    InvalidIdError,
    ParsedId,
    PrefixMismatchError,
    is_valid_id_format,
    normalize_id,
    parse_id,
    validate_prefix,
)


class TestParseId:
    """Tests for parse_id function."""

    def test_simple_id(self) -> None:
        """Test parsing a root ID."""
        parsed = parse_id("bd-a7x")
        assert parsed.prefix == "bd"
        assert parsed.hash == "a7x"
        assert parsed.child_path == ()
        assert parsed.is_root()

    def test_uppercase_is_lowercased(self) -> None:
        """Test that input is lowercased before parsing."""
        parsed = parse_id("BD-A7X")
        assert parsed.prefix == "bd"
        assert parsed.hash == "a7x"

    def test_hyphenated_prefix(self) -> None:
        """Test that the last dash separates prefix from hash."""
        parsed = parse_id("my-proj-a7x3q9")
        assert parsed.prefix == "my-proj"
        assert parsed.hash == "a7x3q9"

    def test_many_dashes_in_prefix(self) -> None:
        """Test prefixes with several dashes."""
        parsed = parse_id("my-long-proj-name-a7x")
        assert parsed.prefix == "my-long-proj-name"
        assert parsed.hash == "a7x"

    def test_child_path(self) -> None:
        """Test parsing child path segments."""
        assert parse_id("bd-a7x.1").child_path == (1,)
        assert parse_id("bd-a7x.1.3.7").child_path == (1, 3, 7)
        assert parse_id("bd-a7x.0").child_path == (0,)

    def test_dash_after_dot_is_not_split_point(self) -> None:
        """Test that only dashes before the first dot are considered."""
        with pytest.raises(InvalidIdError):
            parse_id("bd-a7x.1-2")

    def test_child_path_max_u32(self) -> None:
        """Test that the largest 32-bit value is accepted."""
        assert parse_id("bd-a7x.4294967295").child_path == (4294967295,)

    def test_child_path_overflow_rejected(self) -> None:
        """Test that segments beyond 2^32 - 1 are rejected."""
        with pytest.raises(InvalidIdError):
            parse_id("bd-a7x.4294967296")

    @pytest.mark.parametrize(
        "id_str",
        ["bd-a7x.abc", "bd-a7x.-1", "bd-a7x.+1", "bd-a7x.", "bd-a7x..1", "bd-a7x.1 "],
    )
    def test_malformed_child_path_rejected(self, id_str: str) -> None:
        """Test that non-numeric or signed segments are rejected."""
        with pytest.raises(InvalidIdError):
            parse_id(id_str)

    def test_three_char_hash_needs_no_digit(self) -> None:
        """Test that 3-character hashes may be all letters."""
        assert parse_id("bd-abc").hash == "abc"
        assert parse_id("bd-123").hash == "123"

    def test_four_plus_char_hash_needs_digit(self) -> None:
        """Test the digit rule that keeps English words out."""
        with pytest.raises(InvalidIdError):
            parse_id("bd-test")
        with pytest.raises(InvalidIdError):
            parse_id("bd-hello")
        assert parse_id("bd-tes3").hash == "tes3"
        assert parse_id("bd-1234").hash == "1234"

    def test_short_hashes(self) -> None:
        """Test that 1- and 2-character hashes are accepted."""
        assert parse_id("bd-a").hash == "a"
        assert parse_id("bd-ab").hash == "ab"

    def test_very_long_hash(self) -> None:
        """Test a long hash containing a digit."""
        assert parse_id("bd-abcdefghijklmnop1").hash == "abcdefghijklmnop1"

    @pytest.mark.parametrize(
        "id_str",
        ["invalid", "", "bd-", "bd-a_x", "bd-a7x!", "bd-a7 x", "bd-a7x\n", "a7x.1"],
    )
    def test_invalid_formats(self, id_str: str) -> None:
        """Test that malformed IDs are rejected."""
        with pytest.raises(InvalidIdError):
            parse_id(id_str)

    def test_error_carries_lowercased_input(self) -> None:
        """Test that the error reports the offending string."""
        with pytest.raises(InvalidIdError) as exc_info:
            parse_id("BD-TEST")
        assert exc_info.value.id == "bd-test"
        assert str(exc_info.value) == "invalid ID format: bd-test"

    def test_invalid_id_error_is_value_error(self) -> None:
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            parse_id("nodash")


class TestRoundTrip:
    """Tests that parse and to_id_string are inverse."""

    @pytest.mark.parametrize(
        "id_str",
        ["bd-a7x", "my-proj-a7x3q9", "bd-a7x.1", "bd-a7x.1.3.7", "x-y-z-0.0.4294967295"],
    )
    def test_string_round_trip(self, id_str: str) -> None:
        """Test that canonical IDs survive parse/serialize."""
        assert parse_id(id_str).to_id_string() == id_str

    def test_uppercase_round_trip_is_lowercase(self) -> None:
        """Test that serialization is lowercase."""
        assert str(parse_id("MY-PROJ-A7X3Q9.2")) == "my-proj-a7x3q9.2"

    def test_model_round_trip(self) -> None:
        """Test that re-parsing a serialized model gives an equal model."""
        original = ParsedId(prefix="my-proj", hash="a7x3q9", child_path=(1, 2))
        assert parse_id(original.to_id_string()) == original


class TestIsValidIdFormat:
    """Tests for is_valid_id_format function."""

    def test_valid(self) -> None:
        """Test that valid IDs are accepted."""
        assert is_valid_id_format("bd-a7x") is True
        assert is_valid_id_format("BD-A7X.1") is True
        assert is_valid_id_format("my-proj-a7x3q9") is True

    def test_invalid(self) -> None:
        """Test that invalid IDs are rejected without raising."""
        assert is_valid_id_format("bd-test") is False
        assert is_valid_id_format("nodash") is False
        assert is_valid_id_format("bd-a7x.x") is False


class TestNormalizeId:
    """Tests for normalize_id function."""

    def test_lowercases(self) -> None:
        """Test that IDs are lowercased."""
        assert normalize_id("BD-A7X") == "bd-a7x"
        assert normalize_id("Bd-A7x.1") == "bd-a7x.1"

    def test_does_not_trim(self) -> None:
        """Test that normalization only changes case."""
        assert normalize_id(" BD-A7X ") == " bd-a7x "


class TestValidatePrefix:
    """Tests for validate_prefix function."""

    def test_expected_prefix(self) -> None:
        """Test that the expected prefix passes."""
        validate_prefix("bd-a7x", "bd", [])

    def test_allowed_prefix(self) -> None:
        """Test that an allowed prefix passes."""
        validate_prefix("tk-a7x", "bd", ["tk", "zz"])

    def test_mismatch(self) -> None:
        """Test that other prefixes raise PrefixMismatchError."""
        with pytest.raises(PrefixMismatchError) as exc_info:
            validate_prefix("org-a7x", "usr", ["adm"])
        assert exc_info.value.expected == "usr"
        assert exc_info.value.found == "org"
        assert str(exc_info.value) == "prefix mismatch: expected 'usr', found 'org'"

    def test_invalid_id_propagates(self) -> None:
        """Test that parse failures are raised, not masked as mismatches."""
        with pytest.raises(InvalidIdError):
            validate_prefix("bd-test", "bd", [])

    def test_hyphenated_prefix(self) -> None:
        """Test prefix validation with a hyphenated prefix."""
        validate_prefix("my-proj-a7x", "my-proj")
        with pytest.raises(PrefixMismatchError):
            validate_prefix("my-proj-a7x", "proj")
