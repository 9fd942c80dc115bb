"""
Translation I/O Module.

Reads and writes the files exchanged with the translator:
- JSON translation file (segments with an optional "translation" field)
- Plain-text marker format for LLM translation ([pN] line, then text)
- XLIFF 1.2 for CAT tools, via translate-toolkit
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from translate.storage.xliff import xlifffile

from .errors import UnsupportedFormatError
from .models import ParagraphSegment, TranslationFile
from .xml_segments import unescape_xml


# A marker line is exactly "[pN]"
MARKER_PATTERN = re.compile(r'^\[(p\d+)\]$')

XLIFF_SUFFIXES = ('.xlf', '.xliff')


@dataclass
class TextMap:
    """Original text to translated text, with join statistics."""
    translations: dict[str, str] = field(default_factory=dict)
    translated_count: int = 0
    missing_count: int = 0


def render_plain_text(segments: Iterable[ParagraphSegment]) -> str:
    """
    Render segments in the plain-text marker format.

    Format:
        [p0]
        First paragraph

        [p1]
        Second paragraph
    """
    return '\n'.join(f"[{seg.id}]\n{seg.text}\n" for seg in segments)


def parse_plain_text(content: str) -> dict[str, str]:
    """
    Parse the plain-text marker format.

    All lines after a marker up to the next marker belong to that segment.

    Returns:
        Dictionary mapping segment ID to translated text (trimmed).
    """
    translations = {}
    current_id: Optional[str] = None
    current_lines: list[str] = []

    for line in content.splitlines():
        match = MARKER_PATTERN.match(line)
        if match:
            if current_id is not None and current_lines:
                translations[current_id] = '\n'.join(current_lines).strip()
            current_id = match.group(1)
            current_lines = []
        elif current_id is not None:
            current_lines.append(line)

    if current_id is not None and current_lines:
        translations[current_id] = '\n'.join(current_lines).strip()

    return translations


def write_translation_file(
    translation_file: TranslationFile,
    output_path: Union[str, Path],
) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(translation_file.to_json(), encoding="utf-8")


def load_translation_file(path: Union[str, Path]) -> TranslationFile:
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    return TranslationFile.from_dict(data)


def write_plain_text(
    segments: Iterable[ParagraphSegment],
    output_path: Union[str, Path],
) -> str:
    output_path = Path(output_path)
    content = render_plain_text(segments)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return content


def generate_xliff(
    translation_file: TranslationFile,
    output_path: Union[str, Path],
    source_language: str = "en",
    target_language: Optional[str] = None,
) -> None:
    """
    Generate an XLIFF 1.2 file with one trans-unit per segment.

    The trans-unit id is the segment ID; the source part is stored as a
    location so translators can tell body text from headers and notes.
    XLIFF escapes its own content, so source and target hold plain text.
    """
    store = xlifffile()
    store.setsourcelanguage(source_language)
    if target_language:
        store.settargetlanguage(target_language)

    for seg in translation_file.segments:
        unit = store.addsourceunit(unescape_xml(seg.text))
        unit.setid(seg.id)
        if seg.translation:
            unit.target = unescape_xml(seg.translation)
        unit.addlocation(seg.source)
        unit.addnote(f"runCount: {seg.run_count}", origin="developer")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        store.serialize(f)


def parse_xliff(xliff_path: Union[str, Path]) -> dict[str, str]:
    """Parse an XLIFF file into a dictionary of segment ID to target text."""
    with open(xliff_path, 'rb') as f:
        store = xlifffile(f)

    translations = {}
    for unit in store.units:
        if unit.isheader():
            continue
        target = unit.target
        if target:
            translations[unit.xmlelement.get("id")] = target

    return translations


def load_translations(path: Union[str, Path]) -> dict[str, str]:
    """
    Load translations keyed by segment ID from a .txt, .json or .xlf file.
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext == '.txt':
        return parse_plain_text(path.read_text(encoding="utf-8"))
    if ext == '.json':
        return load_translation_file(path).get_translations()
    if ext in XLIFF_SUFFIXES:
        return parse_xliff(path)

    raise UnsupportedFormatError(f"Unsupported translation file: {path.name}")


def build_text_map(
    segments: Iterable[ParagraphSegment],
    translations: dict[str, str],
) -> TextMap:
    """
    Join original segments with translations on segment ID.

    Segments with a missing or blank translation are counted, not mapped.
    """
    text_map = TextMap()

    for seg in segments:
        translation = translations.get(seg.id)
        if translation and translation.strip():
            text_map.translations[seg.text] = translation
            text_map.translated_count += 1
        else:
            text_map.missing_count += 1

    return text_map


def get_translation_prompt(block_count: int, target_language: str = "French") -> str:
    """Generate the prompt for LLM translation of the plain-text file."""
    return f"""Translate the {block_count} paragraphs below to {target_language}. Rules:
- Each paragraph starts with a marker line like [p0]
- Keep every marker line exactly as-is, on its own line
- Translate ONLY the text under each marker
- Keep a blank line between paragraphs
- Do not add any other text"""
