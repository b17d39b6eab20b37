"""markdown-it parser construction and AST building"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


def make_parser(preset: str = "gfm-like", allow_html: bool = False) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False, "html": allow_html})


def parse_markdown(text: str, parser: MarkdownIt) -> SyntaxTreeNode:
    """Parse markdown text into a SyntaxTreeNode rooted at a 'root' node."""
    return SyntaxTreeNode(parser.parse(text))
