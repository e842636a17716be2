"""
ID repository protocol and reference implementations.

The generator and resolver never touch storage directly. They consult an
`IdRepository`, which answers two questions about the caller's ID universe:
does this exact ID exist, and which IDs have a hash containing this
substring. Storage-backed callers implement the protocol over their own
datastore; the implementations here cover tests and the CLI.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from terseid.core.ids.parser import normalize_id
from terseid.core.ids.resolver import find_matching_ids

logger = logging.getLogger(__name__)


@runtime_checkable
class IdRepository(Protocol):
    """
    Protocol for the existence and substring oracles over issued IDs.

    Implementations must answer truthfully and quickly: `exists` may be
    called thousands of times by a single generation in pathological cases.
    Neither method may mutate the repository.
    """

    def exists(self, candidate_id: str) -> bool:
        """
        Check whether an ID is already in use.

        Args:
            candidate_id: Full lowercase candidate ID

        Returns:
            True if the ID is taken
        """
        ...

    def find_by_substring(self, partial: str) -> list[str]:
        """
        Find IDs whose hash portion contains `partial`.

        Args:
            partial: Normalized (lowercase, trimmed) partial input

        Returns:
            Canonical IDs of all matches; only the count is significant to
            the resolver
        """
        ...


class InMemoryIdRepository:
    """
    Set-backed IdRepository.

    IDs are stored normalized (lowercased) and iterate in insertion order.
    """

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: dict[str, None] = {}
        for id_str in ids:
            self.add(id_str)

    def add(self, id_str: str) -> None:
        """Record an ID as issued."""
        self._ids[normalize_id(id_str)] = None

    def exists(self, candidate_id: str) -> bool:
        return normalize_id(candidate_id) in self._ids

    def find_by_substring(self, partial: str) -> list[str]:
        return find_matching_ids(self._ids, partial)

    def __contains__(self, id_str: object) -> bool:
        return isinstance(id_str, str) and self.exists(id_str)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)


class FileIdRepository:
    """
    IdRepository backed by a newline-delimited text file.

    Blank lines and lines starting with '#' are ignored. The file is read
    on first access; `add` appends to it and creates parent directories.
    A missing file is an empty repository.
    """

    def __init__(self, path: Path):
        self.path = path
        self._cache: InMemoryIdRepository | None = None

    def _load(self) -> InMemoryIdRepository:
        if self._cache is not None:
            return self._cache

        ids: list[str] = []
        if self.path.exists():
            with self.path.open(encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith("#"):
                        continue
                    ids.append(line)
            logger.debug("Loaded %d IDs from %s", len(ids), self.path)

        self._cache = InMemoryIdRepository(ids)
        return self._cache

    def add(self, id_str: str) -> None:
        """Append an ID to the file and the in-memory view."""
        repo = self._load()
        normalized = normalize_id(id_str)
        if repo.exists(normalized):
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(normalized + "\n")
        repo.add(normalized)

    def exists(self, candidate_id: str) -> bool:
        return self._load().exists(candidate_id)

    def find_by_substring(self, partial: str) -> list[str]:
        return self._load().find_by_substring(partial)

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())
