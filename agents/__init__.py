# This project was developed with assistance from AI tools.
from .extractor import DisclosureExtractorAgent

__all__ = ["DisclosureExtractorAgent"]
