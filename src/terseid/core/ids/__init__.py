"""
ID system for short, collision-resistant identifiers.

IDs have the form `{prefix}-{hash}[.{child}.{path}]`, e.g. `bd-a7x` or
`my-proj-a7x3q9.1.3`. This package generates them, parses and validates
them, derives child IDs, and resolves partial user input back to a
canonical ID.

Public API:
    Models:
        - ParsedId: Structured form of an ID (prefix, hash, child path)
        - ResolvedId: Result of resolution with its MatchType

    Codec functions:
        - base36_hash: Seed bytes to a fixed-length base36 string
        - base36_encode: Integer to base36
        - compute_digest: Seed bytes to a 64-bit digest

    Parser functions:
        - parse_id: Parse string ID into ParsedId
        - is_valid_id_format: Check if string is valid ID format
        - normalize_id: Lowercase an ID
        - validate_prefix: Check an ID's prefix

    Child functions:
        - child_id, is_child_id, id_depth, id_ancestors

    Generation and resolution:
        - IdGenerator: Adaptive-length generator with fallback tiers
        - IdResolver: Staged fuzzy resolver
        - find_matching_ids: Reference substring matcher

    Repositories:
        - IdRepository: Protocol for existence/substring oracles
        - InMemoryIdRepository, FileIdRepository

Example:
    >>> from terseid.core.ids import parse_id, child_id, id_depth
    >>> parsed = parse_id("BD-A7X.1")
    >>> str(parsed)
    'bd-a7x.1'
    >>> child_id("bd-a7x", 1)
    'bd-a7x.1'
    >>> id_depth("bd-a7x.1.3")
    2
"""

from terseid.core.ids.children import child_id, id_ancestors, id_depth, is_child_id
from terseid.core.ids.errors import (
    AmbiguousIdError,
    IdNotFoundError,
    InvalidIdError,
    PrefixMismatchError,
    TerseIdError,
)
from terseid.core.ids.generator import IdGenerator
from terseid.core.ids.hash import base36_encode, base36_hash, compute_digest
from terseid.core.ids.models import ParsedId
from terseid.core.ids.parser import (
    is_valid_id_format,
    normalize_id,
    parse_id,
    validate_prefix,
)
from terseid.core.ids.repository import FileIdRepository, IdRepository, InMemoryIdRepository
from terseid.core.ids.resolver import IdResolver, MatchType, ResolvedId, find_matching_ids

__all__ = [
    # Models
    "ParsedId",
    "ResolvedId",
    "MatchType",
    # Errors
    "TerseIdError",
    "InvalidIdError",
    "PrefixMismatchError",
    "AmbiguousIdError",
    "IdNotFoundError",
    # Codec functions
    "base36_hash",
    "base36_encode",
    "compute_digest",
    # Parser functions
    "parse_id",
    "is_valid_id_format",
    "normalize_id",
    "validate_prefix",
    # Child functions
    "child_id",
    "is_child_id",
    "id_depth",
    "id_ancestors",
    # Generation and resolution
    "IdGenerator",
    "IdResolver",
    "find_matching_ids",
    # Repositories
    "IdRepository",
    "InMemoryIdRepository",
    "FileIdRepository",
]
