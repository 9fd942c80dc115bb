"""
WordprocessingML Paragraph Segments.

Scans raw document-part XML for paragraphs (<w:p>) and their text runs (<w:t>):
1. Extract each paragraph's concatenated run text as a translation segment
2. Re-inject translated text into the same runs, leaving all other markup as-is

Text is matched with regular expressions rather than parsed into a tree, so
the output differs from the input only inside the rewritten <w:t> elements.
"""

from __future__ import annotations

import re
from typing import Mapping
from xml.sax.saxutils import escape, unescape

from .models import ParagraphSegment


# Opening tag may carry attributes and is never self-closing (<w:p/>).
# Content is captured non-greedily up to the first </w:p>.
PARAGRAPH_PATTERN = re.compile(r'(<w:p(?:\s[^>]*)?(?<!/)>)(.*?)</w:p>', re.DOTALL)

# Leaf text run; inner text holds no markup and keeps its entities.
TEXT_PATTERN = re.compile(r'<w:t(\s[^>]*)?(?<!/)>([^<]*)</w:t>')

SEGMENT_ID_PREFIX = "p"

_ESCAPE_ENTITIES = {'"': '&quot;', "'": '&apos;'}
_UNESCAPE_ENTITIES = {'&quot;': '"', '&apos;': "'"}


def get_run_texts(paragraph_content: str) -> list[str]:
    """Get the inner text of every <w:t> run in a paragraph, in order."""
    return [match.group(2) for match in TEXT_PATTERN.finditer(paragraph_content)]


def get_paragraph_text(paragraph_content: str) -> str:
    """Get the paragraph text used both as segment text and as lookup key."""
    return ''.join(get_run_texts(paragraph_content))


def extract_paragraph_segments(
    xml: str,
    source: str,
    start_id: int = 0,
) -> tuple[list[ParagraphSegment], int]:
    """
    Extract all paragraph segments from a document part.

    Each paragraph becomes one translation unit with all its run text
    combined. Blank paragraphs are skipped without consuming an ID.

    Args:
        xml: Raw XML text of the document part.
        source: Path of the part within the package (e.g. "word/document.xml").
        start_id: First counter value to assign.

    Returns:
        Tuple of (segments in document order, next unused counter value).
    """
    segments = []
    next_id = start_id

    for match in PARAGRAPH_PATTERN.finditer(xml):
        texts = get_run_texts(match.group(2))
        combined = ''.join(texts)

        if not combined.strip():
            continue

        segments.append(ParagraphSegment(
            id=f"{SEGMENT_ID_PREFIX}{next_id}",
            text=combined,
            source=source,
            run_count=len(texts),
        ))
        next_id += 1

    return segments, next_id


def replace_paragraph_text(xml: str, translations: Mapping[str, str]) -> str:
    """
    Replace paragraph text in a document part with translations.

    Args:
        xml: Raw XML text of the document part.
        translations: Mapping of original paragraph text to translated text.

    Returns:
        New XML text. Paragraphs without a translation are left byte-identical.
    """
    def replace(match: re.Match) -> str:
        opening_tag, content = match.group(1), match.group(2)

        original = get_paragraph_text(content)
        translation = translations.get(original)
        if translation is None:
            return match.group(0)

        assert TEXT_PATTERN.search(content), (
            f"Translation matched a paragraph without text runs: {original!r}"
        )
        return f"{opening_tag}{_rewrite_runs(content, translation)}</w:p>"

    return PARAGRAPH_PATTERN.sub(replace, xml)


def _rewrite_runs(content: str, translation: str) -> str:
    """Put all translated text in the first run and empty the rest."""
    escaped = escape_xml(translation)
    is_first = True

    def replace(match: re.Match) -> str:
        nonlocal is_first
        attributes = match.group(1) or ''
        if is_first:
            is_first = False
            return f"<w:t{attributes}>{escaped}</w:t>"
        return f"<w:t{attributes}></w:t>"

    return TEXT_PATTERN.sub(replace, content)


def escape_xml(text: str) -> str:
    """Escape the five predefined XML entities."""
    return escape(text, _ESCAPE_ENTITIES)


def unescape_xml(text: str) -> str:
    """Unescape the five predefined XML entities."""
    return unescape(text, _UNESCAPE_ENTITIES)
