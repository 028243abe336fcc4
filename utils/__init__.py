# This project was developed with assistance from AI tools.
from .extraction_cache import ExtractionCache, get_extraction_cache
from .geocoding import GSIGeocoder, lookup_hazards
from .llm_json import extract_json_object, parse_json_object
from .ocr import OCRResult, ocr_pdf
from .pdf import NoTextError, PDFExtractionResult, extract_text_from_pdf
from .record_merge import FieldPath, apply_edits, build_record, deep_merge, parse_edit, set_field

__all__ = [
    "ExtractionCache",
    "get_extraction_cache",
    "GSIGeocoder",
    "lookup_hazards",
    "extract_json_object",
    "parse_json_object",
    "PDFExtractionResult",
    "extract_text_from_pdf",
    "NoTextError",
    "OCRResult",
    "ocr_pdf",
    "FieldPath",
    "apply_edits",
    "build_record",
    "deep_merge",
    "parse_edit",
    "set_field",
]
