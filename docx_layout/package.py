"""
DOCX Package Handling.

A DOCX file is a ZIP archive of XML parts. The package is held in memory as
a mapping of archive path to raw bytes; only the translatable parts are
decoded and rewritten, every other entry is carried through untouched.
"""

from __future__ import annotations

import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .errors import EntryNotFoundError, InvalidPackageError
from .xml_segments import extract_paragraph_segments


# Parts of a Word document that may contain translatable text
TRANSLATABLE_PATTERNS = [
    re.compile(r'^word/document\.xml$'),
    re.compile(r'^word/header\d*\.xml$'),
    re.compile(r'^word/footer\d*\.xml$'),
    re.compile(r'^word/footnotes\.xml$'),
    re.compile(r'^word/endnotes\.xml$'),
    re.compile(r'^word/comments\.xml$'),
]


@dataclass
class PackageInfo:
    """Summary of a DOCX package."""
    entry_count: int
    translatable_files: list[str]
    segment_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_segments(self) -> int:
        return sum(self.segment_counts.values())


def read_package(docx_path: Union[str, Path]) -> dict[str, bytes]:
    """
    Read all files from a DOCX archive.

    Args:
        docx_path: Path to the DOCX file.

    Returns:
        Dictionary mapping archive path to content, in archive order.
    """
    docx_path = Path(docx_path)
    if not docx_path.exists():
        raise FileNotFoundError(f"DOCX file not found: {docx_path}")

    files = {}
    try:
        with zipfile.ZipFile(docx_path, 'r') as zf:
            for name in zf.namelist():
                files[name] = zf.read(name)
    except zipfile.BadZipFile as e:
        raise InvalidPackageError(f"Not a valid DOCX archive: {docx_path} ({e})") from e
    return files


def write_package(files: dict[str, bytes], output_path: Union[str, Path]) -> None:
    """Write files to a DOCX archive."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(output_path, 'w', zipfile.ZIP_DEFLATED) as zf:
        for name, content in files.items():
            zf.writestr(name, content)


def get_xml_content(files: dict[str, bytes], path: str) -> str:
    """Get the text content of a part in the package."""
    if path not in files:
        raise EntryNotFoundError(path)
    return files[path].decode('utf-8')


def set_xml_content(files: dict[str, bytes], path: str, content: str) -> None:
    """Set the text content of a part in the package."""
    files[path] = content.encode('utf-8')


def is_translatable(path: str) -> bool:
    return any(pattern.match(path) for pattern in TRANSLATABLE_PATTERNS)


def get_translatable_files(files: dict[str, bytes]) -> list[str]:
    """List the parts that may contain translatable text, in archive order."""
    return [path for path in files if is_translatable(path)]


def describe_package(files: dict[str, bytes]) -> PackageInfo:
    """
    Summarize a package without modifying it.

    Segment counts use the same shared ID counter as a full extraction.
    """
    translatable = get_translatable_files(files)
    info = PackageInfo(
        entry_count=len(files),
        translatable_files=translatable,
    )

    next_id = 0
    for path in translatable:
        segments, next_id = extract_paragraph_segments(
            get_xml_content(files, path), path, next_id
        )
        info.segment_counts[path] = len(segments)

    return info
