"""
Fuzzy ID resolution.

Maps possibly inexact user input (wrong case, surrounding whitespace,
missing prefix, partial hash) to exactly one canonical ID. Resolution is
staged and stops at the first success:

1. Exact: the normalized input exists
2. Prefix-normalized: input without a dash exists once the default prefix
   is prepended
3. Substring: the repository reports exactly one ID whose hash contains
   the input (two or more is ambiguous)
4. Otherwise the ID is not found

All knowledge of which IDs exist comes from the caller's IdRepository.

Example:
    >>> from terseid.core.ids.repository import InMemoryIdRepository
    >>> resolver = IdResolver(ResolverConfig(default_prefix="bd"))
    >>> resolved = resolver.resolve("A7X", InMemoryIdRepository(["bd-a7x"]))
    >>> resolved.id, resolved.match_type.value
    ('bd-a7x', 'prefix_normalized')
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from terseid.core.config.models import ResolverConfig
from terseid.core.ids.errors import AmbiguousIdError, IdNotFoundError, InvalidIdError
from terseid.core.ids.parser import parse_id

if TYPE_CHECKING:
    from terseid.core.ids.repository import IdRepository

logger = logging.getLogger(__name__)


class MatchType(str, Enum):
    """How an input was matched to an ID."""

    EXACT = "exact"
    PREFIX_NORMALIZED = "prefix_normalized"
    SUBSTRING = "substring"


class ResolvedId(BaseModel):
    """A successfully resolved ID with match information."""

    id: str
    match_type: MatchType
    original_input: str

    model_config = ConfigDict(frozen=True)


class IdResolver:
    """Resolver for fuzzy ID matching."""

    def __init__(self, config: ResolverConfig):
        self.config = config

    def resolve(self, input: str, repository: IdRepository) -> ResolvedId:
        """
        Resolve user input to a single canonical ID.

        Args:
            input: Raw user input, preserved as-is in the result
            repository: Existence and substring oracle over issued IDs

        Returns:
            The resolved ID and how it was matched

        Raises:
            AmbiguousIdError: If substring search found two or more IDs
            IdNotFoundError: If no stage matched
        """
        normalized = input.lower().strip()

        if repository.exists(normalized):
            logger.debug("Resolved %r exactly", input)
            return ResolvedId(
                id=normalized, match_type=MatchType.EXACT, original_input=input
            )

        if "-" not in normalized:
            prefixed = f"{self.config.default_prefix}-{normalized}"
            if repository.exists(prefixed):
                logger.debug("Resolved %r with default prefix as %s", input, prefixed)
                return ResolvedId(
                    id=prefixed,
                    match_type=MatchType.PREFIX_NORMALIZED,
                    original_input=input,
                )

        if self.config.allow_substring_match:
            matches = repository.find_by_substring(normalized)
            if len(matches) == 1:
                logger.debug("Resolved %r by substring as %s", input, matches[0])
                return ResolvedId(
                    id=matches[0], match_type=MatchType.SUBSTRING, original_input=input
                )
            if len(matches) > 1:
                raise AmbiguousIdError(partial=normalized, matches=matches)

        raise IdNotFoundError(normalized)


def find_matching_ids(all_ids: Iterable[str], hash_substring: str) -> list[str]:
    """
    Find IDs whose hash contains a substring.

    Unparseable IDs are skipped. Matches are returned in canonical
    (lowercase, re-serialized) form in input order.

    Args:
        all_ids: Candidate ID strings
        hash_substring: Literal substring to look for in each hash

    Returns:
        Canonical IDs whose hash contains `hash_substring`

    Example:
        >>> find_matching_ids(["bd-a7x", "BD-A7Y.1", "bd-zzz", "junk"], "a7")
        ['bd-a7x', 'bd-a7y.1']
    """
    matches: list[str] = []
    for id_str in all_ids:
        try:
            parsed = parse_id(id_str)
        except InvalidIdError:
            continue
        if hash_substring in parsed.hash:
            matches.append(parsed.to_id_string())
    return matches
