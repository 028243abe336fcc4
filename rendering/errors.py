# This project was developed with assistance from AI tools.
"""Rendering failures. All of them abort the render; no partial document is produced."""


class RenderError(Exception):
    """Base class for fatal rendering failures."""


class TemplateLoadError(RenderError):
    """The template asset could not be read, fetched or parsed."""


class FontLoadError(RenderError):
    """The embedding font could not be read, fetched or registered."""


class ConfigurationError(RenderError):
    """A rendering setting names a template version or mark style that does not exist."""
