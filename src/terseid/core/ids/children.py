"""
Hierarchical child ID helpers.

Child IDs are formed by appending dot-separated numbers to a parent ID:
bd-a7x → bd-a7x.1 → bd-a7x.1.3. The query helpers here treat malformed
input as a root rather than raising.
"""

from terseid.core.ids.errors import InvalidIdError
from terseid.core.ids.parser import parse_id


def child_id(parent_id: str, child_number: int) -> str:
    """
    Create a child ID by appending `.{child_number}` to the parent.

    The parent is not validated; any nesting depth is allowed.

    Examples:
        >>> child_id("bd-a7x", 1)
        'bd-a7x.1'
        >>> child_id("bd-a7x.1", 3)
        'bd-a7x.1.3'
    """
    return f"{parent_id}.{child_number}"


def is_child_id(id_str: str) -> bool:
    """Return True if the ID has a child path; False for roots and invalid IDs."""
    try:
        return not parse_id(id_str).is_root()
    except InvalidIdError:
        return False


def id_depth(id_str: str) -> int:
    """
    Return the number of child path segments in an ID.

    Invalid IDs report depth 0.

    Examples:
        >>> id_depth("bd-a7x")
        0
        >>> id_depth("bd-a7x.1.3")
        2
    """
    try:
        return parse_id(id_str).depth()
    except InvalidIdError:
        return 0


def id_ancestors(id_str: str) -> list[str]:
    """
    List the ancestors of an ID, nearest parent first.

    Returns canonical (lowercased) ID strings ending at the root. Roots and
    invalid IDs have no ancestors.

    Example:
        >>> id_ancestors("bd-a7x.1.3")
        ['bd-a7x.1', 'bd-a7x']
    """
    try:
        parsed = parse_id(id_str)
    except InvalidIdError:
        return []

    ancestors: list[str] = []
    for depth in range(parsed.depth() - 1, -1, -1):
        ancestor = parsed.model_copy(update={"child_path": parsed.child_path[:depth]})
        ancestors.append(ancestor.to_id_string())
    return ancestors
