"""Unit tests for core/highlight.py"""

from pygments.lexer import RegexLexer
from pygments.token import Keyword, Name, String, Text as TextToken

from idbdoc.core.highlight import find_lexer, highlight_code, highlight_tree, token_class
from idbdoc.core.models import Element, Root, Text, text_content
from idbdoc.core.parse import parse_markdown
from idbdoc.core.transform import to_html_tree


class _LetterLexer(RegexLexer):
    tokens = {"root": [(r"a", Keyword), (r"b", Keyword), (r"\s+", TextToken)]}


def _highlighted(parser, md: str) -> Root:
    return highlight_tree(to_html_tree(parse_markdown(md, parser)))


def _spans(node) -> list[Element]:
    found = []
    if isinstance(node, Element):
        if node.tag == "span":
            found.append(node)
        for c in node.children:
            found.extend(_spans(c))
    return found


def test_token_class_standard_names():
    """Token types map to Pygments short class names, walking up to a known parent."""
    assert token_class(Keyword) == "k"
    assert token_class(String.Double) == "s2"
    assert token_class(Name.Builtin.Pseudo) == "bp"
    assert token_class(TextToken) == ""


def test_find_lexer_known_and_unknown():
    """find_lexer returns None for unknown languages."""
    assert find_lexer("javascript") is not None
    assert find_lexer("no-such-language") is None


def test_highlight_code_merges_adjacent_tokens():
    """Consecutive tokens of one class share a span; plain text is unwrapped."""
    nodes = highlight_code("ab\n", _LetterLexer(stripnl=False, ensurenl=False))
    assert nodes == (Element("span", {"class": ["k"]}, (Text("ab"),)), Text("\n"))


def test_known_language_is_highlighted(parser):
    """A js fence gets token spans and the highlight + language classes on pre."""
    tree = _highlighted(parser, "```js\nconst x = 1\n```\n")
    pre = tree.children[0]
    assert pre.attrs["class"] == ["highlight", "language-js"]
    code = pre.children[0]
    assert code.attrs == {"class": ["language-js"]}
    spans = _spans(code)
    assert spans
    keyword = next(s for s in spans if text_content(s) == "const")
    assert keyword.attrs["class"][0].startswith("k")


def test_highlighting_preserves_text(parser):
    """Stripping highlight markup gives back exactly the original code."""
    tree = _highlighted(parser, "```js\nconst x = 1\n```\n")
    assert text_content(tree.children[0]).strip() == "const x = 1"


def test_highlighting_preserves_surrounding_whitespace(parser):
    """Leading blank lines, indentation and trailing newlines survive lexing."""
    code = "\n\n    if (a) {\n\treturn 'b'\n    }\n\n"
    tree = _highlighted(parser, f"```js\n{code}```\n")
    assert text_content(tree) == code


def test_custom_css_class(parser):
    """The class added to highlighted pre elements is configurable."""
    tree = highlight_tree(to_html_tree(parse_markdown("```python\nx = 1\n```\n", parser)), "code-hl")
    assert tree.children[0].attrs["class"] == ["code-hl", "language-python"]


def test_unknown_language_passes_through(parser):
    """An unknown language tag leaves the block untouched."""
    before = to_html_tree(parse_markdown("```nosuchlang\nconst x = 1\n```\n", parser))
    assert highlight_tree(before) == before


def test_missing_language_passes_through(parser):
    """An untagged block is left verbatim."""
    before = to_html_tree(parse_markdown("```\n<b>x</b>\n```\n", parser))
    after = highlight_tree(before)
    assert after == before
    assert text_content(after) == "<b>x</b>\n"


def test_nested_code_blocks_are_highlighted(parser):
    """Code inside list items and blockquotes is found."""
    tree = _highlighted(parser, "> ```python\n> print('hi')\n> ```\n")
    pre = tree.children[0].children[0]
    assert pre.tag == "pre"
    assert _spans(pre)


def test_highlight_tree_does_not_mutate_input(parser):
    """highlight_tree returns a new tree."""
    before = to_html_tree(parse_markdown("```js\nlet a\n```\n", parser))
    snapshot = repr(before)
    highlight_tree(before)
    assert repr(before) == snapshot
