"""Wrap rendered content in a full HTML document skeleton"""

from idbdoc.config import Settings
from idbdoc.core.models import Doctype, Element, Node, Root, Text


def build_head(settings: Settings) -> Element:
    """Return <head> with charset, title, viewport, stylesheet and script."""
    children: list[Node] = [
        Element("meta", {"charset": "utf-8"}),
        Element("title", {}, (Text(settings.title),)),
        Element("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
    ]
    if settings.stylesheet:
        children.append(Element("link", {"rel": "stylesheet", "href": settings.stylesheet}))
    if settings.script:
        children.append(Element("script", {"src": settings.script}))
    return Element("head", {}, tuple(children))


def wrap_document(content: Root, settings: Settings) -> Root:
    """Wrap a content fragment in doctype, <html>, <head> and <body>."""
    html_attrs = {"lang": settings.language} if settings.language else {}
    body = Element("body", {}, content.children)
    return Root((Doctype(), Element("html", html_attrs, (build_head(settings), body))))
