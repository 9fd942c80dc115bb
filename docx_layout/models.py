"""
Translation file data structures.

Field names in the JSON form are camelCase so translation files stay
interchangeable with other tools that read the same format.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ParagraphSegment:
    """A paragraph extracted from a DOCX package."""

    id: str
    text: str  # Combined run text, exactly as it appears in the markup
    source: str  # Path within the package (e.g. "word/document.xml")
    run_count: int  # Informational only
    translation: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = {
            "id": self.id,
            "text": self.text,
            "source": self.source,
            "runCount": self.run_count,
        }
        if self.translation is not None:
            data["translation"] = self.translation
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParagraphSegment:
        return cls(
            id=data["id"],
            text=data["text"],
            source=data.get("source", ""),
            run_count=data.get("runCount", 0),
            translation=data.get("translation"),
        )


@dataclass
class TranslationFile:
    """The structured translation file written by extraction."""

    original_file: str
    extracted_at: str  # ISO 8601 timestamp
    segments: list[ParagraphSegment] = field(default_factory=list)
    source_language: Optional[str] = None
    target_language: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {}
        if self.source_language:
            data["sourceLanguage"] = self.source_language
        if self.target_language:
            data["targetLanguage"] = self.target_language
        data["originalFile"] = self.original_file
        data["extractedAt"] = self.extracted_at
        data["segments"] = [seg.to_dict() for seg in self.segments]
        return data

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslationFile:
        return cls(
            original_file=data.get("originalFile", ""),
            extracted_at=data.get("extractedAt", ""),
            segments=[ParagraphSegment.from_dict(s) for s in data.get("segments", [])],
            source_language=data.get("sourceLanguage"),
            target_language=data.get("targetLanguage"),
        )

    def get_texts(self) -> dict[str, str]:
        """Get mapping of segment ID to original text."""
        return {seg.id: seg.text for seg in self.segments}

    def get_translations(self) -> dict[str, str]:
        """Get mapping of segment ID to translation, for filled-in segments."""
        return {
            seg.id: seg.translation
            for seg in self.segments
            if seg.translation
        }
