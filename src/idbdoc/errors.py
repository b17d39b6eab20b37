"""Terminal rendering errors reported by the CLI"""


class RenderError(Exception):
    """Base class for failures that abort a conversion."""


class InputReadError(RenderError):
    """The input stream failed or was not valid UTF-8."""


class SerializationError(RenderError):
    """The HTML tree could not be rendered to text."""
