"""DocumentRenderer: parse -> transform -> highlight -> template -> format -> serialize"""

from idbdoc.config import Settings
from idbdoc.core.document import wrap_document
from idbdoc.core.format import format_tree
from idbdoc.core.highlight import highlight_tree
from idbdoc.core.parse import make_parser, parse_markdown
from idbdoc.core.serialize import serialize
from idbdoc.core.transform import to_html_tree


class DocumentRenderer:
    """Render a complete markdown document into a styled HTML page.

    The renderer holds only its settings and a configured parser; each call to
    render builds and discards its own trees.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._parser = make_parser(settings.parser_config, settings.allow_html)

    def render(self, markdown: str) -> str:
        """Return the full HTML document for markdown text."""
        ast = parse_markdown(markdown, self._parser)
        tree = to_html_tree(ast)
        tree = highlight_tree(tree, self.settings.highlight_class)
        tree = wrap_document(tree, self.settings)
        tree = format_tree(tree, self.settings.indent)
        return serialize(tree)


def render_markdown(markdown: str, settings: Settings = None) -> str:
    """Render markdown with settings, or the built-in defaults."""
    return DocumentRenderer(settings or Settings()).render(markdown)
