"""HTML tree to text serialization"""

import re

from markdown_it.common.utils import escapeHtml

from idbdoc.core.models import AttrValue, Doctype, Element, Node, Raw, Root, Text
from idbdoc.errors import SerializationError


VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

TAG_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9-]*$')
ATTR_NAME_RE = re.compile(r'^[^\s"\'>/=\x00-\x1f\x7f]+$')


def _attr(name: str, value: AttrValue) -> str:
    if not ATTR_NAME_RE.match(name):
        raise SerializationError(f"Invalid attribute name: {name!r}")
    if value is True:
        return f" {name}"
    if isinstance(value, list):
        value = " ".join(value)
    return f' {name}="{escapeHtml(value)}"'


def _element(node: Element, parts: list[str]) -> None:
    if not TAG_NAME_RE.match(node.tag):
        raise SerializationError(f"Invalid tag name: {node.tag!r}")
    attrs = "".join(_attr(k, v) for k, v in node.attrs.items() if v is not False and v is not None)
    parts.append(f"<{node.tag}{attrs}>")
    if node.tag in VOID_ELEMENTS:
        if node.children:
            raise SerializationError(f"Void element <{node.tag}> cannot have children")
        return
    if node.tag in RAW_TEXT_ELEMENTS:
        for child in node.children:
            if not isinstance(child, Text):
                raise SerializationError(f"<{node.tag}> may only contain text")
            if f"</{node.tag}" in child.value.lower():
                raise SerializationError(f"<{node.tag}> content would close the element early")
            parts.append(child.value)
    else:
        for child in node.children:
            _write(child, parts)
    parts.append(f"</{node.tag}>")


def _write(node: Node, parts: list[str]) -> None:
    if isinstance(node, Text):
        parts.append(escapeHtml(node.value))
    elif isinstance(node, Element):
        _element(node, parts)
    elif isinstance(node, Raw):
        parts.append(node.value)
    elif isinstance(node, Doctype):
        parts.append("<!doctype html>")
    elif isinstance(node, Root):
        for child in node.children:
            _write(child, parts)
    else:
        raise SerializationError(f"Unknown node type: {type(node).__name__}")


def serialize(tree: Node) -> str:
    """Render tree to an HTML string."""
    parts: list[str] = []
    _write(tree, parts)
    return "".join(parts)
