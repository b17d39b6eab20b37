"""Pygments syntax highlighting of fenced code blocks in the HTML tree

Code blocks come out of the transform stage as ``pre > code.language-<name>``.
When Pygments knows ``<name>``, the code's text is replaced by a run of
``span`` elements whose class is the Pygments short token class (``k`` for
keywords, ``s2`` for double-quoted strings, ``c1`` for line comments and so
on), which is what ``HtmlFormatter.get_style_defs`` styles. Plain text tokens
stay unwrapped. Anything else is left exactly as it was.
"""

from functools import lru_cache
from typing import Optional

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.token import STANDARD_TYPES
from pygments.util import ClassNotFound

from idbdoc.core.models import Element, Node, Root, Text, text_content


LANGUAGE_PREFIX = "language-"


@lru_cache(maxsize=None)
def find_lexer(language: str) -> Optional[Lexer]:
    """Return a lexer for language that preserves input text exactly, or None."""
    try:
        return get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return None


def token_class(ttype) -> str:
    """Map a token type to its nearest Pygments short class name ('' for plain text)."""
    while ttype not in STANDARD_TYPES:
        ttype = ttype.parent
    return STANDARD_TYPES[ttype]


def highlight_code(code: str, lexer: Lexer) -> tuple[Node, ...]:
    """Tokenize code and wrap each lexical category in a classed span."""
    runs: list[tuple[str, str]] = []
    for ttype, value in lexer.get_tokens(code):
        if not value:
            continue
        cls = token_class(ttype)
        if runs and runs[-1][0] == cls:
            runs[-1] = (cls, runs[-1][1] + value)
        else:
            runs.append((cls, value))
    return tuple(
        Element("span", {"class": [cls]}, (Text(value),)) if cls else Text(value)
        for cls, value in runs
    )


def _code_language(code: Element) -> Optional[str]:
    for name in code.classes():
        if name.startswith(LANGUAGE_PREFIX) and len(name) > len(LANGUAGE_PREFIX):
            return name[len(LANGUAGE_PREFIX):]
    return None


def _highlight_pre(pre: Element, css_class: str) -> Element:
    if len(pre.children) != 1 or not isinstance(pre.children[0], Element):
        return pre
    code = pre.children[0]
    language = _code_language(code) if code.tag == "code" else None
    lexer = find_lexer(language) if language else None
    if lexer is None:
        return pre

    classes = [c for c in pre.classes() if c not in (css_class, f"{LANGUAGE_PREFIX}{language}")]
    attrs = dict(pre.attrs)
    attrs["class"] = [css_class, f"{LANGUAGE_PREFIX}{language}", *classes]
    spans = highlight_code(text_content(code), lexer)
    return Element("pre", attrs, (Element("code", dict(code.attrs), spans),))


def _walk(node: Node, css_class: str) -> Node:
    if isinstance(node, Element):
        if node.tag == "pre":
            return _highlight_pre(node, css_class)
        return Element(node.tag, dict(node.attrs), tuple(_walk(c, css_class) for c in node.children))
    if isinstance(node, Root):
        return Root(tuple(_walk(c, css_class) for c in node.children))
    return node


def highlight_tree(tree: Root, css_class: str = "highlight") -> Root:
    """Return a copy of tree with every known-language code block highlighted."""
    return _walk(tree, css_class)
