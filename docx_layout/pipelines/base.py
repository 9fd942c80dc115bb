"""
Pipeline base classes and enums for DOCX translation.

Supported Pipelines:
- TAGGED: JSON translation file plus [pN] plain-text file for LLM translation
- XLIFF: Additionally generate XLIFF 1.2 for professional CAT tools
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class PipelineType(Enum):
    """Available translation pipelines."""
    TAGGED = "tagged"   # JSON + [pN] plain text
    XLIFF = "xliff"     # JSON + [pN] plain text + XLIFF


@dataclass
class PipelineConfig:
    """Base configuration for all pipelines."""

    # Pipeline selection
    pipeline_type: PipelineType = PipelineType.TAGGED

    # Language settings
    target_language: str = "French"
    source_language: str = "en"

    # Output settings
    output_dir: Optional[Path] = None  # Uses input file directory if None


@dataclass
class ExtractResult:
    """Result from extract phase."""
    translation_path: Path
    translate_path: Path
    segment_count: int
    part_counts: dict[str, int] = field(default_factory=dict)
    extra_files: dict[str, Path] = field(default_factory=dict)  # Pipeline-specific files


@dataclass
class MergeResult:
    """Result from merge phase."""
    output_path: Path
    translated_count: int
    missing_count: int
    updated_files: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class TranslationPipeline(ABC):
    """
    Abstract base class for translation pipelines.

    All pipelines follow a two-phase workflow:
    1. Extract: Generate translation files from the input DOCX
    2. Merge: Rebuild the DOCX with translations
    """

    def __init__(self, config: PipelineConfig):
        self.config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable pipeline name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Pipeline description for help text."""
        pass

    @abstractmethod
    def extract(
        self,
        input_path: Path,
        translation_path: Optional[Path] = None,
    ) -> ExtractResult:
        """
        Extract paragraph segments and generate translation files.

        Args:
            input_path: Path to input DOCX.
            translation_path: JSON output path (derived from input if None).

        Returns:
            ExtractResult with paths to generated files.
        """
        pass

    @abstractmethod
    def merge(
        self,
        input_path: Path,
        output_path: Path,
        translated_path: Path,
        original_path: Path,
    ) -> MergeResult:
        """
        Merge translations and rebuild the DOCX.

        Args:
            input_path: Path to original DOCX.
            output_path: Path for output DOCX.
            translated_path: Path to file with translations.
            original_path: Path to the JSON file written by extract.

        Returns:
            MergeResult with output path and statistics.
        """
        pass

    @abstractmethod
    def get_translation_prompt(self, block_count: int) -> str:
        """
        Get the LLM prompt for translation.

        Args:
            block_count: Number of paragraphs to translate.

        Returns:
            Prompt string for the LLM.
        """
        pass

    def derive_paths(self, input_path: Path) -> dict[str, Path]:
        """
        Derive translation file paths from input path.

        Can be overridden by subclasses for custom naming.
        """
        directory = self.config.output_dir or input_path.parent
        stem = input_path.stem
        return {
            "translation": directory / f"{stem}.json",
            "translate": directory / f"{stem}.txt",
            "output": directory / f"{stem}_translated.docx",
        }
