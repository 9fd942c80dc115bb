"""
DOCX Segment Extractor Module.

Extracts paragraph segments from every translatable part of a DOCX package,
assigning IDs from one counter shared across all parts.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, Union

from .models import ParagraphSegment, TranslationFile
from .package import get_translatable_files, get_xml_content, read_package
from .translation_io import write_translation_file
from .xml_segments import extract_paragraph_segments


def utc_timestamp() -> str:
    """Current time as an ISO 8601 UTC string, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DocxExtractor:
    """
    Extracts paragraph segments from a DOCX file.

    Parts are processed in archive order; all operations are deterministic
    for a given package and start ID.
    """

    def __init__(self, docx_path: Union[str, Path]):
        """
        Initialize extractor with DOCX file path.

        Args:
            docx_path: Path to the DOCX file to extract from.
        """
        self.docx_path = Path(docx_path)
        if not self.docx_path.exists():
            raise FileNotFoundError(f"DOCX file not found: {self.docx_path}")

        self._files: Optional[dict[str, bytes]] = None

    @property
    def files(self) -> dict[str, bytes]:
        """Get the package contents, reading the archive if necessary."""
        if self._files is None:
            self._files = read_package(self.docx_path)
        return self._files

    def iter_parts(self, start_id: int = 0) -> Iterator[tuple[str, list[ParagraphSegment]]]:
        """
        Extract segments part by part.

        Yields:
            Tuples of (part path, segments from that part).
        """
        next_id = start_id
        for path in get_translatable_files(self.files):
            xml = get_xml_content(self.files, path)
            segments, next_id = extract_paragraph_segments(xml, path, next_id)
            yield path, segments

    def extract(
        self,
        source_language: Optional[str] = None,
        target_language: Optional[str] = None,
    ) -> TranslationFile:
        """
        Extract all paragraph segments from the DOCX.

        Returns:
            TranslationFile containing every segment in document order.
        """
        segments = []
        for _, part_segments in self.iter_parts():
            segments.extend(part_segments)

        return TranslationFile(
            original_file=self.docx_path.name,
            extracted_at=utc_timestamp(),
            segments=segments,
            source_language=source_language,
            target_language=target_language,
        )


def extract_docx_segments(
    docx_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> TranslationFile:
    """
    Convenience function to extract segments from a DOCX.

    Args:
        docx_path: Path to input DOCX.
        output_path: Optional path to save the JSON translation file.

    Returns:
        TranslationFile with all segments.
    """
    translation_file = DocxExtractor(docx_path).extract()

    if output_path:
        write_translation_file(translation_file, output_path)

    return translation_file
