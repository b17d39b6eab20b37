"""Re-indent an HTML tree for readability without changing its rendering

Whitespace is only added or removed where HTML ignores it: between block-level
siblings and at the inner edges of block containers. Elements whose content is
whitespace-sensitive are copied untouched, and children of elements with no
block-level child (paragraph text, inline markup) are never re-wrapped.
Whitespace-only text next to a block sibling or a container edge is discarded
before breaks are inserted, so formatting already formatted output yields the
same tree. Whitespace between two inline siblings is kept as it is.
"""

from idbdoc.core.models import Doctype, Element, Node, Raw, Root, Text


BLOCK_ELEMENTS = frozenset({
    "html", "head", "body", "title", "meta", "link", "script", "style", "base",
    "address", "article", "aside", "blockquote", "dd", "details", "dialog", "div",
    "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "main", "nav",
    "ol", "p", "pre", "section", "summary", "table", "caption", "colgroup", "col",
    "thead", "tbody", "tfoot", "tr", "th", "td", "ul",
})
WHITESPACE_SENSITIVE = frozenset({"pre", "textarea", "script", "style", "listing", "plaintext"})
HTML_WHITESPACE = " \t\n\r\f"


def _is_block(node: Node) -> bool:
    if isinstance(node, Element):
        return node.tag in BLOCK_ELEMENTS
    if isinstance(node, Raw):
        return node.block
    return isinstance(node, Doctype)


def _is_blank(node: Node) -> bool:
    return isinstance(node, Text) and not node.value.strip(HTML_WHITESPACE)


def _neighbour(children: tuple[Node, ...], i: int, step: int) -> Node | None:
    """Nearest non-blank sibling of children[i] in direction step, or None at the edge."""
    i += step
    while 0 <= i < len(children):
        if not _is_blank(children[i]):
            return children[i]
        i += step
    return None


def _at_block_boundary(children: tuple[Node, ...], i: int) -> bool:
    """True when a block sibling or the container edge is on either side of children[i]."""
    before, after = _neighbour(children, i, -1), _neighbour(children, i, 1)
    return before is None or after is None or _is_block(before) or _is_block(after)


def _break(level: int, indent: int) -> Text:
    return Text("\n" + " " * (indent * max(level, 0)))


def _format_children(children: tuple[Node, ...], level: int, indent: int, root: bool) -> tuple[Node, ...]:
    """Format the children of a node whose own content sits at level."""
    if not any(_is_block(c) for c in children):
        return tuple(_format(c, level, indent) for c in children)

    kept = [c for i, c in enumerate(children) if not (_is_blank(c) and _at_block_boundary(children, i))]
    out: list[Node] = []
    for i, child in enumerate(kept):
        breaks_before = i == 0 or _is_block(child) or _is_block(kept[i - 1])
        breaks_after = i == len(kept) - 1 or _is_block(kept[i + 1])
        if breaks_before and not (root and i == 0):
            out.append(_break(level, indent))
        if isinstance(child, Text):
            value = child.value
            if breaks_before:
                value = value.lstrip(HTML_WHITESPACE)
            if breaks_after:
                value = value.rstrip(HTML_WHITESPACE)
            out.append(Text(value))
        else:
            out.append(_format(child, level, indent))
    out.append(Text("\n") if root else _break(level - 1, indent))
    return tuple(out)


def _format(node: Node, level: int, indent: int) -> Node:
    if isinstance(node, Element):
        if node.tag in WHITESPACE_SENSITIVE:
            return node
        return Element(node.tag, dict(node.attrs), _format_children(node.children, level + 1, indent, False))
    return node


def format_tree(tree: Root, indent: int = 2) -> Root:
    """Return a re-indented copy of tree; top-level nodes start at column 0."""
    return Root(_format_children(tree.children, 0, indent, True))
