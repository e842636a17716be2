"""
Terseid - short, typeable, collision-resistant IDs.

Generates IDs like `bd-a7x` whose hash grows with the number of issued
IDs, parses and validates them, derives hierarchical child IDs
(`bd-a7x.1.3`), and resolves partial input back to a canonical ID.
"""

__version__ = "0.1.0"

# Re-export the ID engine for convenience
from terseid.core.config.models import IdConfig, ResolverConfig
from terseid.core.ids import (
    AmbiguousIdError,
    FileIdRepository,
    IdGenerator,
    IdNotFoundError,
    IdRepository,
    IdResolver,
    InMemoryIdRepository,
    InvalidIdError,
    MatchType,
    ParsedId,
    PrefixMismatchError,
    ResolvedId,
    TerseIdError,
    base36_hash,
    child_id,
    find_matching_ids,
    id_ancestors,
    id_depth,
    is_child_id,
    is_valid_id_format,
    normalize_id,
    parse_id,
    validate_prefix,
)

__all__ = [
    "IdConfig",
    "ResolverConfig",
    "IdGenerator",
    "IdResolver",
    "IdRepository",
    "InMemoryIdRepository",
    "FileIdRepository",
    "ParsedId",
    "ResolvedId",
    "MatchType",
    "TerseIdError",
    "InvalidIdError",
    "PrefixMismatchError",
    "AmbiguousIdError",
    "IdNotFoundError",
    "base36_hash",
    "parse_id",
    "is_valid_id_format",
    "normalize_id",
    "validate_prefix",
    "child_id",
    "is_child_id",
    "id_depth",
    "id_ancestors",
    "find_matching_ids",
    "__version__",
]
