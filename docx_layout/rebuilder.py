"""
DOCX Rebuilder Module.

Injects translated text into every translatable part of a DOCX package and
writes the result as a new archive. The original file is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Union

from .errors import NoTranslationsError
from .package import (
    get_translatable_files,
    get_xml_content,
    read_package,
    set_xml_content,
    write_package,
)
from .translation_io import build_text_map, load_translation_file, load_translations
from .xml_segments import replace_paragraph_text


@dataclass
class RebuildStats:
    """Result of rebuilding a DOCX."""
    output_path: Path
    updated_files: list[str] = field(default_factory=list)
    changed_files: list[str] = field(default_factory=list)
    translated_count: int = 0
    missing_count: int = 0


class DocxRebuilder:
    """
    Rebuilds a DOCX with translations.

    Process:
    1. Read the original package into memory
    2. Replace paragraph text in each translatable part
    3. Write all entries to the output archive
    """

    def apply(
        self,
        files: dict[str, bytes],
        translations: Mapping[str, str],
    ) -> RebuildStats:
        """
        Apply translations to a package in place.

        Args:
            files: Package contents (archive path to bytes).
            translations: Mapping of original paragraph text to translated text.

        Returns:
            RebuildStats listing updated and actually changed parts.
        """
        stats = RebuildStats(output_path=Path())

        for path in get_translatable_files(files):
            xml = get_xml_content(files, path)
            new_xml = replace_paragraph_text(xml, translations)
            set_xml_content(files, path, new_xml)
            stats.updated_files.append(path)
            if new_xml != xml:
                stats.changed_files.append(path)

        return stats

    def rebuild(
        self,
        docx_path: Union[str, Path],
        translations: Mapping[str, str],
        output_path: Union[str, Path],
    ) -> RebuildStats:
        """
        Rebuild DOCX with translations.

        Args:
            docx_path: Path to original DOCX.
            translations: Mapping of original paragraph text to translated text.
            output_path: Path for output DOCX.
        """
        files = read_package(docx_path)
        stats = self.apply(files, translations)

        stats.output_path = Path(output_path)
        write_package(files, stats.output_path)
        return stats


def rebuild_docx(
    docx_path: Union[str, Path],
    original_path: Union[str, Path],
    translations_path: Union[str, Path],
    output_path: Union[str, Path],
) -> RebuildStats:
    """
    Convenience function to rebuild a DOCX from translation files.

    Args:
        docx_path: Path to original DOCX.
        original_path: Path to the JSON file written by extraction.
        translations_path: Path to translations (.json, .txt or .xlf).
        output_path: Path for output DOCX.

    Raises:
        NoTranslationsError: If no segment has a usable translation.
    """
    original = load_translation_file(original_path)
    text_map = build_text_map(original.segments, load_translations(translations_path))

    if not text_map.translations:
        raise NoTranslationsError(text_map.missing_count)

    stats = DocxRebuilder().rebuild(docx_path, text_map.translations, output_path)
    stats.translated_count = text_map.translated_count
    stats.missing_count = text_map.missing_count
    return stats
