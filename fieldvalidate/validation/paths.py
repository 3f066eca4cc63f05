"""Field path composition for nested structures.

Traversal code validates leaf values first and learns the enclosing field
names on the way back up. These helpers build the dotted and bracketed
identifiers it passes to the binder, e.g. "Users[0].Address.Zip".
"""

from typing import Any

from fieldvalidate.config import get_settings
from fieldvalidate.validation.binding import bind_field
from fieldvalidate.validation.protocols import FieldError


def join_field(parent: str, name: str) -> str:
    """Join a parent path and a child field name.

    Returns whichever part is non-empty when the other is empty.
    """
    if not parent:
        return name
    if not name:
        return parent
    return f"{parent}{get_settings().path_separator}{name}"


def index_field(parent: str, key: Any) -> str:
    """Build the path of a slice element or map entry (e.g. "Tags[2]")."""
    return f"{parent}[{key}]"


def prefix_field(error: FieldError, parent: str) -> FieldError:
    """Prepend a parent path to the field identifier of an error.

    Index paths are appended without a separator so that "Users" and "[0]"
    join to "Users[0]".
    """
    current = getattr(error, "field", "") or ""
    if current.startswith("["):
        return bind_field(error, f"{parent}{current}")
    return bind_field(error, join_field(parent, current))
