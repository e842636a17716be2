"""
ID model for short hash-based identifiers.

A terseid ID has the form `{prefix}-{hash}[.{n}...]`:

ID Format Examples:
    - Root:        bd-a7x
    - Hyphenated:  my-proj-a7x3q9
    - Child:       bd-a7x.1
    - Grandchild:  bd-a7x.1.3

The prefix is a human-chosen namespace, the hash is a base36 digest
segment, and the optional child path encodes a position in a tree rooted
at the base ID.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from terseid.core.ids.errors import InvalidIdError

MAX_CHILD_SEGMENT = 2**32 - 1


class ParsedId(BaseModel):
    """
    Structured form of an ID: {prefix}-{hash}.{child}.{path} → bd-a7x.1.3

    Instances are produced by `parse_id` and never mutated. Serializing with
    `to_id_string()` and re-parsing yields an equal value.
    """

    prefix: str
    hash: str
    child_path: tuple[int, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("child_path")
    @classmethod
    def validate_child_path(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Validate that every segment fits in an unsigned 32-bit integer."""
        for segment in v:
            if segment < 0 or segment > MAX_CHILD_SEGMENT:
                raise ValueError(
                    f"Child path segment out of range (0..{MAX_CHILD_SEGMENT}): {segment}"
                )
        return v

    def is_root(self) -> bool:
        """Return True if this ID has no child path."""
        return not self.child_path

    def depth(self) -> int:
        """Return the number of child path segments (0 for a root)."""
        return len(self.child_path)

    def parent(self) -> str | None:
        """
        Return the parent ID string, or None for a root ID.

        Example:
            >>> ParsedId(prefix="bd", hash="a7x", child_path=(1, 3)).parent()
            'bd-a7x.1'
        """
        if not self.child_path:
            return None
        parent = self.model_copy(update={"child_path": self.child_path[:-1]})
        return parent.to_id_string()

    def to_id_string(self) -> str:
        """Format as {prefix}-{hash} followed by .{n} for each child segment."""
        result = f"{self.prefix}-{self.hash}"
        for segment in self.child_path:
            result += f".{segment}"
        return result

    def is_child_of(self, potential_parent: str) -> bool:
        """
        Check whether this ID is a descendant of `potential_parent`.

        A descendant shares the prefix and hash, has a strictly longer child
        path, and its child path starts with the parent's. An unparseable
        parent is never an ancestor, and no ID is a child of itself.

        Args:
            potential_parent: The candidate ancestor ID string

        Returns:
            True if this ID lives below `potential_parent` in the tree
        """
        from terseid.core.ids.parser import parse_id

        try:
            parent = parse_id(potential_parent)
        except InvalidIdError:
            return False

        if self.prefix != parent.prefix or self.hash != parent.hash:
            return False

        if len(self.child_path) <= len(parent.child_path):
            return False

        return self.child_path[: len(parent.child_path)] == parent.child_path

    def __str__(self) -> str:
        """Format as the canonical ID string."""
        return self.to_id_string()
