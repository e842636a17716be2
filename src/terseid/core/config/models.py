"""
Configuration data models for terseid.

`IdConfig` and `ResolverConfig` parameterize a single generator or resolver
and are immutable; the `with_*` builders return new instances.
`TerseidConfig` describes the structure of .terseid.json and
~/.config/terseid/config.json files.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Longest hash length accepted by IdConfig
MAX_HASH_LENGTH = 100


class IdConfig(BaseModel):
    """
    Generation parameters for an IdGenerator.

    Hash length adapts to the number of existing IDs: the generator picks
    the shortest length in [min_hash_length, max_hash_length] whose
    birthday-bound collision probability is below max_collision_prob.
    """

    prefix: str = Field(
        default="id",
        min_length=1,
        description="Namespace prefix placed before the hash (e.g. 'bd')"
    )
    min_hash_length: int = Field(
        default=3,
        ge=1,
        le=MAX_HASH_LENGTH,
        description="Shortest hash length the generator will use"
    )
    max_hash_length: int = Field(
        default=8,
        ge=1,
        le=MAX_HASH_LENGTH,
        description="Longest adaptive hash length before fallback tiers"
    )
    max_collision_prob: float = Field(
        default=0.25,
        gt=0.0,
        lt=1.0,
        description="Acceptable collision probability (0.0-1.0, exclusive)"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("prefix")
    @classmethod
    def lowercase_prefix(cls, v: str) -> str:
        """Store the prefix lowercased so generated IDs are canonical."""
        return v.lower()

    @model_validator(mode="after")
    def validate_length_range(self) -> "IdConfig":
        """Validate that min_hash_length does not exceed max_hash_length."""
        if self.min_hash_length > self.max_hash_length:
            raise ValueError(
                f"min_hash_length ({self.min_hash_length}) must not exceed "
                f"max_hash_length ({self.max_hash_length})"
            )
        return self

    def with_min_hash_length(self, length: int) -> "IdConfig":
        """Return a copy with a different minimum hash length."""
        return self._rebuild(min_hash_length=length)

    def with_max_hash_length(self, length: int) -> "IdConfig":
        """Return a copy with a different maximum hash length."""
        return self._rebuild(max_hash_length=length)

    def with_max_collision_prob(self, prob: float) -> "IdConfig":
        """Return a copy with a different collision probability threshold."""
        return self._rebuild(max_collision_prob=prob)

    def _rebuild(self, **changes: Any) -> "IdConfig":
        # Rebuild through the constructor so validators run
        return IdConfig(**{**self.model_dump(), **changes})


class ResolverConfig(BaseModel):
    """
    Settings for an IdResolver.

    allowed_prefixes is carried for callers that validate prefixes
    alongside resolution; resolution itself does not consult it.
    """

    default_prefix: str = Field(
        min_length=1,
        description="Prefix prepended to input that has no dash"
    )
    allowed_prefixes: frozenset[str] = Field(
        default_factory=frozenset,
        description="Additional prefixes accepted by prefix validation"
    )
    allow_substring_match: bool = Field(
        default=True,
        description="Resolve partial hashes through repository substring search"
    )

    model_config = ConfigDict(frozen=True)

    def with_allowed_prefixes(self, prefixes: list[str] | set[str]) -> "ResolverConfig":
        """Return a copy with a different set of allowed prefixes."""
        return self.model_copy(update={"allowed_prefixes": frozenset(prefixes)})

    def with_substring_match(self, enabled: bool) -> "ResolverConfig":
        """Return a copy with substring matching enabled or disabled."""
        return self.model_copy(update={"allow_substring_match": enabled})


class ResolverSettings(BaseModel):
    """Resolver options as they appear in config files."""

    allowed_prefixes: list[str] = Field(
        default_factory=list,
        description="Extra prefixes accepted alongside ids.prefix"
    )
    allow_substring_match: bool = Field(
        default=True,
        description="Resolve partial hashes through substring search"
    )


class StoreConfig(BaseModel):
    """Where the CLI keeps issued IDs."""

    ids_file: Path = Field(
        default=Path(".terseid/ids.txt"),
        description="Newline-delimited file of issued IDs (relative to project)"
    )


class TerseidConfig(BaseModel):
    """
    Main terseid configuration.

    Combines all configuration sections loaded from config files.
    Supports multi-layer merging: defaults < user < project < env vars.
    """

    ids: IdConfig = Field(default_factory=IdConfig)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    store: StoreConfig = Field(default_factory=StoreConfig)

    model_config = ConfigDict(extra="ignore")

    def resolver_config(self) -> ResolverConfig:
        """Build the ResolverConfig for this project, defaulting to ids.prefix."""
        return ResolverConfig(
            default_prefix=self.ids.prefix,
            allowed_prefixes=frozenset(self.resolver.allowed_prefixes),
            allow_substring_match=self.resolver.allow_substring_match,
        )
