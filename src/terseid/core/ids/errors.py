"""
Error types for ID parsing, validation and resolution.

Every failure carries only the offending strings, never a nested cause.
Callers decide whether to retry with different input.
"""


class TerseIdError(Exception):
    """Base class for all terseid errors."""

    def _fields(self) -> tuple[object, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerseIdError) or type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self).__name__, repr(self._fields())))

    def __reduce__(self) -> tuple[object, ...]:
        # args only holds the formatted message; rebuild from the fields
        return (type(self), self._fields() or self.args)


class InvalidIdError(TerseIdError, ValueError):
    """Raised when a string does not satisfy the ID grammar."""

    def __init__(self, id: str):
        super().__init__(f"invalid ID format: {id}")
        self.id = id

    def _fields(self) -> tuple[object, ...]:
        return (self.id,)


class PrefixMismatchError(TerseIdError, ValueError):
    """Raised when an ID parses but carries an unexpected prefix."""

    def __init__(self, expected: str, found: str):
        super().__init__(f"prefix mismatch: expected '{expected}', found '{found}'")
        self.expected = expected
        self.found = found

    def _fields(self) -> tuple[object, ...]:
        return (self.expected, self.found)


class AmbiguousIdError(TerseIdError):
    """
    Raised when a partial ID matches more than one candidate.

    Attributes:
        partial: The normalized partial input
        matches: Candidate IDs in the order the repository returned them
    """

    def __init__(self, partial: str, matches: list[str]):
        super().__init__(f"ambiguous ID '{partial}': matches {matches!r}")
        self.partial = partial
        self.matches = list(matches)

    def _fields(self) -> tuple[object, ...]:
        return (self.partial, tuple(self.matches))


class IdNotFoundError(TerseIdError, LookupError):
    """Raised when no resolution stage produced a match."""

    def __init__(self, id: str):
        super().__init__(f"ID not found: {id}")
        self.id = id

    def _fields(self) -> tuple[object, ...]:
        return (self.id,)
