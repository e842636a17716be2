"""
ID parser and validator.

This module converts ID strings into `ParsedId` models and validates the
grammar:

    id        := prefix "-" hash childpath*
    prefix    := [a-z0-9-]+   (the last '-' before any '.' is the split point)
    hash      := base36{1,}   (4+ chars must contain at least one digit)
    childpath := "." uint32

Input is lowercased before parsing, so matching is case-insensitive and
output is always lowercase. The digit rule keeps short English words
(e.g. "bd-test") from being read as hashes; 3-character hashes are exempt.

Public API:
    - parse_id: Parse string ID into a ParsedId
    - is_valid_id_format: Check if string is valid ID format
    - normalize_id: Lowercase an ID string
    - validate_prefix: Check an ID's prefix against expected/allowed prefixes
"""

import re
from collections.abc import Iterable

from terseid.core.ids.errors import InvalidIdError, PrefixMismatchError
from terseid.core.ids.models import MAX_CHILD_SEGMENT, ParsedId

_HASH_REGEX = re.compile(r"[0-9a-z]+")
_DIGIT_REGEX = re.compile(r"[0-9]")
_SEGMENT_REGEX = re.compile(r"[0-9]+")

# Hashes at least this long must contain a digit
_DIGIT_REQUIRED_LENGTH = 4


def parse_id(id_str: str) -> ParsedId:
    """
    Parse a string ID into a ParsedId.

    Args:
        id_str: The ID string to parse (any case)

    Returns:
        The parsed, lowercased ID

    Raises:
        InvalidIdError: If the string does not satisfy the ID grammar

    Examples:
        >>> parse_id("BD-A7X").hash
        'a7x'
        >>> parse_id("my-proj-a7x3q9").prefix
        'my-proj'
        >>> parse_id("bd-a7x.1.3").child_path
        (1, 3)
        >>> parse_id("bd-test")
        Traceback (most recent call last):
            ...
        terseid.core.ids.errors.InvalidIdError: invalid ID format: bd-test
    """
    normalized = id_str.lower()

    # Child path starts at the first dot; the prefix split is the last
    # dash before it.
    first_dot = normalized.find(".")
    head_end = first_dot if first_dot != -1 else len(normalized)
    last_dash = normalized.rfind("-", 0, head_end)
    if last_dash == -1:
        raise InvalidIdError(normalized)

    prefix = normalized[:last_dash]
    hash_str, *segments = normalized[last_dash + 1 :].split(".")

    if not _HASH_REGEX.fullmatch(hash_str):
        raise InvalidIdError(normalized)

    if len(hash_str) >= _DIGIT_REQUIRED_LENGTH and not _DIGIT_REGEX.search(hash_str):
        raise InvalidIdError(normalized)

    child_path: list[int] = []
    for segment in segments:
        if not _SEGMENT_REGEX.fullmatch(segment):
            raise InvalidIdError(normalized)
        number = int(segment)
        if number > MAX_CHILD_SEGMENT:
            raise InvalidIdError(normalized)
        child_path.append(number)

    return ParsedId(prefix=prefix, hash=hash_str, child_path=tuple(child_path))


def is_valid_id_format(id_str: str) -> bool:
    """
    Check if a string is a valid ID format.

    Examples:
        >>> is_valid_id_format("bd-a7x.1")
        True
        >>> is_valid_id_format("invalid")
        False
    """
    try:
        parse_id(id_str)
    except InvalidIdError:
        return False
    return True


def normalize_id(id_str: str) -> str:
    """Normalize an ID string (lowercase only, no trimming)."""
    return id_str.lower()


def validate_prefix(id_str: str, expected: str, allowed: Iterable[str] = ()) -> None:
    """
    Validate that an ID has the expected prefix or one of the allowed prefixes.

    Args:
        id_str: The ID string to check
        expected: The primary expected prefix
        allowed: Additional prefixes that are also accepted

    Raises:
        InvalidIdError: If the ID cannot be parsed
        PrefixMismatchError: If the prefix is neither expected nor allowed
    """
    parsed = parse_id(id_str)

    if parsed.prefix == expected or parsed.prefix in set(allowed):
        return

    raise PrefixMismatchError(expected=expected, found=parsed.prefix)
