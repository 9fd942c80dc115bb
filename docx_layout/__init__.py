"""DOCX paragraph extraction and translation injection modules."""

from .errors import (
    DocxLayoutError,
    EntryNotFoundError,
    InvalidPackageError,
    NoTranslationsError,
    UnsupportedFormatError,
)
from .extractor import DocxExtractor, extract_docx_segments
from .models import ParagraphSegment, TranslationFile
from .rebuilder import DocxRebuilder, RebuildStats, rebuild_docx
from .translation_io import (
    build_text_map,
    load_translations,
    parse_plain_text,
    render_plain_text,
    get_translation_prompt,
)
from .xml_segments import (
    extract_paragraph_segments,
    replace_paragraph_text,
    escape_xml,
    unescape_xml,
)

__all__ = [
    "DocxLayoutError",
    "EntryNotFoundError",
    "InvalidPackageError",
    "NoTranslationsError",
    "UnsupportedFormatError",
    "DocxExtractor",
    "extract_docx_segments",
    "ParagraphSegment",
    "TranslationFile",
    "DocxRebuilder",
    "RebuildStats",
    "rebuild_docx",
    "build_text_map",
    "load_translations",
    "parse_plain_text",
    "render_plain_text",
    "get_translation_prompt",
    "extract_paragraph_segments",
    "replace_paragraph_text",
    "escape_xml",
    "unescape_xml",
]
