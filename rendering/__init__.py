# This project was developed with assistance from AI tools.
"""PDF rendering: field registry, layout engine, page composition and assembly."""
from .assembler import DocumentAssembler, build_assembler, render_disclosure
from .assets import AssetSources
from .calibration import render_calibration
from .errors import ConfigurationError, FontLoadError, RenderError, TemplateLoadError
from .hazard_document import render_hazard_document
from .marks import MarkStyle
from .registry import FieldRegistry, get_registry

__all__ = [
    "AssetSources",
    "ConfigurationError",
    "DocumentAssembler",
    "FieldRegistry",
    "FontLoadError",
    "MarkStyle",
    "RenderError",
    "TemplateLoadError",
    "build_assembler",
    "get_registry",
    "render_calibration",
    "render_disclosure",
    "render_hazard_document",
]
