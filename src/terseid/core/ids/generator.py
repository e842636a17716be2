"""
ID generator with adaptive length and collision avoidance.

The generator proposes candidates of the form `{prefix}-{hash}` and asks the
caller's IdRepository whether each is taken. It is a candidate proposer,
not a lock manager: reserving the returned ID against concurrent
generators is the repository owner's job.

Candidates are tried in four tiers, each longer and more expensive than the
last, returning the first one the repository does not know:

1. Nonce escalation: nonces 0-9 at the optimal length
2. Length extension: nonces 0-9 at each length up to max_hash_length
3. Long fallback: 12-character hashes, nonces 0-1000
4. Desperate fallback: one 12-character hash with the literal nonce
   (0-10000) appended

If all tiers are exhausted, `{prefix}-{hash}.fallback` is returned without
any collision guarantee so that generation never fails.

Example:
    >>> from terseid.core.ids.repository import InMemoryIdRepository
    >>> generator = IdGenerator(IdConfig(prefix="bd"))
    >>> repo = InMemoryIdRepository()
    >>> new_id = generator.generate_for("Fix login bug", repo)
    >>> new_id.startswith("bd-")
    True
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sized
from typing import TYPE_CHECKING

from terseid.core.config.models import IdConfig
from terseid.core.ids.hash import base36_hash

if TYPE_CHECKING:
    from terseid.core.ids.repository import IdRepository

logger = logging.getLogger(__name__)

# Candidates tried per length in the first two tiers
NONCES_PER_LENGTH = 10

# Long fallback tier
LONG_HASH_LENGTH = 12
LONG_FALLBACK_MAX_NONCE = 1000

# Desperate fallback tier (nonce appended literally)
DESPERATE_MAX_NONCE = 10000

FALLBACK_SUFFIX = ".fallback"

SeedFn = Callable[[int], bytes]


class IdGenerator:
    """Generates short, collision-checked IDs for one prefix."""

    def __init__(self, config: IdConfig):
        self.config = config

    @property
    def prefix(self) -> str:
        """The prefix placed before every generated hash."""
        return self.config.prefix

    def optimal_length(self, item_count: int) -> int:
        """
        Compute the shortest hash length with acceptable collision risk.

        Uses the birthday approximation P = 1 - e^(-n^2 / 2d), where
        n = item_count and d = 36^length, scanning from min_hash_length to
        max_hash_length and returning the first length with
        P < max_collision_prob. Returns max_hash_length if none qualifies.

        Args:
            item_count: Number of IDs already issued

        Returns:
            The hash length to use

        Examples:
            >>> IdGenerator(IdConfig(prefix="bd")).optimal_length(50)
            3
            >>> IdGenerator(IdConfig(prefix="bd")).optimal_length(7000)
            6
        """
        n = float(item_count)
        for length in range(self.config.min_hash_length, self.config.max_hash_length + 1):
            space = float(36**length)
            p_collision = 1.0 - math.exp(-(n * n) / (2.0 * space))
            if p_collision < self.config.max_collision_prob:
                return length
        return self.config.max_hash_length

    def candidate(self, seed: bytes | str, hash_length: int) -> str:
        """Build `{prefix}-{hash}` for a seed at the given hash length."""
        return f"{self.config.prefix}-{base36_hash(seed, hash_length)}"

    def generate(self, seed_fn: SeedFn, item_count: int, repository: IdRepository) -> str:
        """
        Generate an ID the repository does not already contain.

        Args:
            seed_fn: Deterministic function from nonce to seed bytes
            item_count: Current number of issued IDs (drives hash length)
            repository: Existence oracle; only `exists` is consulted

        Returns:
            A fresh ID, or the literal `.fallback` ID if every tier is
            exhausted
        """
        optimal = self.optimal_length(item_count)
        logger.debug(
            "Generating %s ID: item_count=%d optimal_length=%d",
            self.config.prefix,
            item_count,
            optimal,
        )

        # Tiers 1 and 2: nonce escalation at the optimal length, then at
        # each longer length up to max_hash_length
        for length in range(optimal, self.config.max_hash_length + 1):
            for nonce in range(NONCES_PER_LENGTH):
                candidate = self.candidate(seed_fn(nonce), length)
                if not repository.exists(candidate):
                    return candidate
            logger.debug("All nonces collided at length %d", length)

        # Tier 3: long fallback
        logger.warning(
            "Adaptive lengths exhausted for prefix %s; trying %d-char hashes",
            self.config.prefix,
            LONG_HASH_LENGTH,
        )
        for nonce in range(LONG_FALLBACK_MAX_NONCE + 1):
            candidate = self.candidate(seed_fn(nonce), LONG_HASH_LENGTH)
            if not repository.exists(candidate):
                return candidate

        # Tier 4: a fixed hash with the nonce appended, unique by construction
        logger.warning(
            "Long fallback exhausted for prefix %s; appending nonces", self.config.prefix
        )
        base = self.candidate(seed_fn(0), LONG_HASH_LENGTH)
        for nonce in range(DESPERATE_MAX_NONCE + 1):
            candidate = f"{base}{nonce}"
            if not repository.exists(candidate):
                return candidate

        fallback = f"{base}{FALLBACK_SUFFIX}"
        logger.warning(
            "Every generation tier collided for prefix %s; returning %s without "
            "a collision guarantee",
            self.config.prefix,
            fallback,
        )
        return fallback

    def generate_for(self, description: str, repository: IdRepository) -> str:
        """
        Generate an ID seeded from a text description.

        Seeds are `"{description}|{nonce}"` encoded as UTF-8. The item count
        is the repository's size when it has one, otherwise 0.
        """
        item_count = len(repository) if isinstance(repository, Sized) else 0
        return self.generate(
            lambda nonce: f"{description}|{nonce}".encode(),
            item_count,
            repository,
        )
