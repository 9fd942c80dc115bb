"""Error definitions for DOCX segment extraction and injection."""

from __future__ import annotations


class DocxLayoutError(Exception):
    """Base exception for all custom errors."""


class EntryNotFoundError(DocxLayoutError, KeyError):
    """Raised when a document part is not present in the package."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"File not found in DOCX: {self.path}"


class InvalidPackageError(DocxLayoutError):
    """Raised when a file is not a readable DOCX (ZIP) archive."""


class NoTranslationsError(DocxLayoutError):
    """Raised when no segment has a usable translation."""

    def __init__(self, missing: int):
        self.missing = missing
        super().__init__(
            f"No translations found ({missing} paragraphs without translation)"
        )


class UnsupportedFormatError(DocxLayoutError, ValueError):
    """Raised when a file or pipeline format is not supported."""
