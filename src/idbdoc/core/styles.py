"""Pygments stylesheet for highlighted code blocks"""

from pygments.formatters import HtmlFormatter


def highlight_css(css_class: str = "highlight", style: str = "default") -> str:
    """Return CSS rules colouring token spans inside pre.<css_class>.

    Raises pygments.util.ClassNotFound for an unknown style name.
    """
    return HtmlFormatter(style=style).get_style_defs(f"pre.{css_class}")
