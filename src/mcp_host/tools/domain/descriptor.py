"""ToolDescriptor value object and the namespacing rules for tool names."""

from typing import Any

from pydantic import BaseModel, Field

# Vendor function-name rules only allow [a-zA-Z0-9_-], so the separator is
# built from underscores rather than a colon.
NAMESPACE_SEPARATOR = "__"


class ToolDescriptor(BaseModel, frozen=True):
    """A callable tool as advertised to the model backend."""

    name: str = Field(min_length=1)
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def namespaced(self, server_id: str) -> "ToolDescriptor":
        """Return a copy of this descriptor renamed into the server's namespace."""
        return self.model_copy(update={"name": namespace(server_id, self.name)})


def namespace(server_id: str, local_name: str) -> str:
    return f"{server_id}{NAMESPACE_SEPARATOR}{local_name}"


def split_namespaced(name: str) -> tuple[str, str] | None:
    """Split a namespaced tool name into (server_id, local_name).

    Returns None unless the name contains exactly one separator with a
    non-empty part on each side.
    """
    parts = name.split(NAMESPACE_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


def is_routable(server_id: str, local_name: str) -> bool:
    """True if the namespaced name splits back into exactly these two parts."""
    return split_namespaced(namespace(server_id, local_name)) == (server_id, local_name)


def is_valid_server_id(server_id: str) -> bool:
    """True if every plain tool name prefixed with server_id routes back to it.

    A trailing underscore would merge into the separator (``a_`` + ``__x``
    splits as ``a`` / ``_x``).
    """
    return (
        bool(server_id)
        and NAMESPACE_SEPARATOR not in server_id
        and not server_id.endswith("_")
    )
