"""Traversal state of the compiler as it walks a YAML document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import yaml


@dataclass
class Context:
    """A named position in a document, linked to the context that contains it."""

    name: str
    node: Optional[yaml.Node] = None
    parent: Optional["Context"] = None
    extension_handlers: Optional[list[Any]] = None

    def description(self) -> str:
        """Return the dotted path from the root context to this one."""
        if self.parent is not None:
            return f"{self.parent.description()}.{self.name}"
        return self.name

    def child(self, name: str, node: Optional[yaml.Node]) -> "Context":
        """Return a context nested inside this one."""
        return new_context(name, node, self)


def new_context(
    name: str, node: Optional[yaml.Node], parent: Optional[Context]
) -> Context:
    """Create a context, inheriting extension handlers from the parent.

    A context without a parent does not keep the node it was given.
    """
    if parent is not None:
        return Context(
            name=name,
            node=node,
            parent=parent,
            extension_handlers=parent.extension_handlers,
        )
    return Context(name=name, node=None, parent=None, extension_handlers=None)