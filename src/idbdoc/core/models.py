"""HTML node tree passed between the render stages"""

from dataclasses import dataclass, field
from typing import Union


AttrValue = Union[str, list[str], bool]


@dataclass(frozen=True)
class Text:
    """Character data; escaped on output."""
    value: str


@dataclass(frozen=True)
class Raw:
    """Markup emitted verbatim (raw HTML from the source, when allowed)."""
    value: str
    block: bool = False


@dataclass(frozen=True)
class Doctype:
    """The <!doctype html> preamble."""


@dataclass(frozen=True)
class Element:
    tag:      str
    attrs:    dict[str, AttrValue] = field(default_factory=dict)
    children: tuple["Node", ...]   = ()

    def classes(self) -> list[str]:
        """Return the class attribute as a list of names."""
        value = self.attrs.get("class")
        if isinstance(value, str):
            return value.split()
        if isinstance(value, list):
            return list(value)
        return []


@dataclass(frozen=True)
class Root:
    """Top of the tree; holds either a content fragment or a whole document."""
    children: tuple["Node", ...] = ()


Node = Union[Root, Element, Text, Raw, Doctype]


def text_content(node: Node) -> str:
    """Return the concatenated character data under node, ignoring markup."""
    if isinstance(node, Text):
        return node.value
    if isinstance(node, (Element, Root)):
        return "".join(text_content(c) for c in node.children)
    return ""
