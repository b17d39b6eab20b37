"""Markdown AST to HTML node tree conversion"""

from typing import Callable

from markdown_it.tree import SyntaxTreeNode

from idbdoc.core.models import AttrValue, Element, Node, Raw, Root, Text


Handler = Callable[[SyntaxTreeNode], list[Node]]


def _attrs(node: SyntaxTreeNode) -> dict[str, AttrValue]:
    """Copy token attrs, dropping empty titles and stringifying values."""
    return {k: str(v) for k, v in node.attrs.items() if not (k == "title" and not v)}


def _children(node: SyntaxTreeNode) -> tuple[Node, ...]:
    return tuple(out for child in node.children for out in convert(child))


def _element(node: SyntaxTreeNode) -> list[Node]:
    return [Element(node.tag, _attrs(node), _children(node))]


def _paragraph(node: SyntaxTreeNode) -> list[Node]:
    # tight list items hide their paragraphs
    if node.hidden:
        return list(_children(node))
    return _element(node)


def _code(node: SyntaxTreeNode) -> list[Node]:
    lang = node.info.strip().split()[0] if node.info.strip() else ""
    attrs: dict[str, AttrValue] = {"class": [f"language-{lang}"]} if lang else {}
    return [Element("pre", {}, (Element("code", attrs, (Text(node.content),)),))]


def _code_inline(node: SyntaxTreeNode) -> list[Node]:
    return [Element("code", {}, (Text(node.content),))]


def _plain_text(node: SyntaxTreeNode) -> str:
    """Flatten an inline subtree to its text, as used for image alt attributes."""
    if node.type in ("text", "code_inline", "html_inline"):
        return node.content
    if node.type in ("softbreak", "hardbreak"):
        return "\n"
    return "".join(_plain_text(c) for c in node.children)


def _image(node: SyntaxTreeNode) -> list[Node]:
    attrs = _attrs(node)
    attrs["alt"] = "".join(_plain_text(c) for c in node.children)
    return [Element("img", attrs)]


def _ordered_list(node: SyntaxTreeNode) -> list[Node]:
    attrs = _attrs(node)
    if attrs.get("start") == "1":
        del attrs["start"]
    return [Element("ol", attrs, _children(node))]


HANDLERS: dict[str, Handler] = {
    "root":         lambda n: list(_children(n)),
    "inline":       lambda n: list(_children(n)),
    "text":         lambda n: [Text(n.content)],
    "softbreak":    lambda n: [Text("\n")],
    "hardbreak":    lambda n: [Element("br"), Text("\n")],
    "hr":           lambda n: [Element("hr")],
    "html_block":   lambda n: [Raw(n.content.rstrip("\n"), block=True)],
    "html_inline":  lambda n: [Raw(n.content)],
    "paragraph":    _paragraph,
    "fence":        _code,
    "code_block":   _code,
    "code_inline":  _code_inline,
    "image":        _image,
    "ordered_list": _ordered_list,
}


def convert(node: SyntaxTreeNode) -> list[Node]:
    """Convert one AST node to zero or more HTML nodes."""
    handler = HANDLERS.get(node.type)
    if handler is not None:
        return handler(node)
    if node.tag and (node.children or node.nester_tokens is not None):
        return _element(node)
    if node.children:
        return list(_children(node))
    return [Text(node.content)] if node.content else []


def to_html_tree(ast: SyntaxTreeNode) -> Root:
    """Map a markdown-it syntax tree onto an HTML Root fragment."""
    return Root(tuple(convert(ast)))
