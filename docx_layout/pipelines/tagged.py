"""
Tagged Text Pipeline - DOCX → JSON + [pN] text → DOCX.

Workflow:
1. Extract paragraph segments from the DOCX XML parts
2. Write the JSON translation file and the [pN] plain-text file
3. Translator fills in "translation" fields or translates the .txt file
4. Join translations with the original extraction on segment ID
5. Inject translated text into the same XML parts and repack the DOCX
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .base import (
    TranslationPipeline,
    PipelineConfig,
    PipelineType,
    ExtractResult,
    MergeResult,
)
from ..extractor import DocxExtractor, utc_timestamp
from ..models import TranslationFile
from ..rebuilder import rebuild_docx
from ..translation_io import (
    get_translation_prompt,
    write_plain_text,
    write_translation_file,
)


@dataclass
class TaggedConfig(PipelineConfig):
    """Configuration specific to the tagged text pipeline."""

    pipeline_type: PipelineType = PipelineType.TAGGED


class TaggedTextPipeline(TranslationPipeline):
    """
    Tagged Text Pipeline.

    Each non-empty paragraph becomes one segment. Formatting runs are kept:
    the translated text goes into the paragraph's first text run and the
    remaining runs are emptied.
    """

    def __init__(self, config: TaggedConfig):
        super().__init__(config)
        self.config: TaggedConfig = config

    @property
    def name(self) -> str:
        return "Tagged Text"

    @property
    def description(self) -> str:
        return "JSON translation file plus [pN] plain text for LLM translation"

    def extract(
        self,
        input_path: Path,
        translation_path: Optional[Path] = None,
    ) -> ExtractResult:
        """Extract segments and write the translation files."""
        paths = self.derive_paths(input_path)
        if translation_path is not None:
            paths["translation"] = translation_path
            paths["translate"] = translation_path.with_suffix(".txt")

        extractor = DocxExtractor(input_path)
        print(f"  Found {len(extractor.files)} files in DOCX")

        segments = []
        part_counts = {}
        for part_path, part_segments in extractor.iter_parts():
            segments.extend(part_segments)
            part_counts[part_path] = len(part_segments)
            print(f"  - {part_path}: {len(part_segments)} paragraphs")

        translation_file = TranslationFile(
            original_file=input_path.name,
            extracted_at=utc_timestamp(),
            segments=segments,
            source_language=self.config.source_language,
            target_language=self.config.target_language,
        )

        write_translation_file(translation_file, paths["translation"])
        write_plain_text(segments, paths["translate"])

        result = ExtractResult(
            translation_path=paths["translation"],
            translate_path=paths["translate"],
            segment_count=len(segments),
            part_counts=part_counts,
        )
        self._write_extra_files(translation_file, paths, result)
        return result

    def _write_extra_files(
        self,
        translation_file: TranslationFile,
        paths: dict[str, Path],
        result: ExtractResult,
    ) -> None:
        """Hook for pipelines that produce additional formats."""

    def merge(
        self,
        input_path: Path,
        output_path: Path,
        translated_path: Path,
        original_path: Path,
    ) -> MergeResult:
        """Join translations with the original extraction and rebuild the DOCX."""
        if not original_path.exists():
            raise FileNotFoundError(
                f"Original extraction not found: {original_path}\n"
                f"  Run: python main.py extract {input_path}"
            )

        stats = rebuild_docx(
            docx_path=input_path,
            original_path=original_path,
            translations_path=translated_path,
            output_path=output_path,
        )

        warnings = []
        if stats.missing_count:
            warnings.append(f"{stats.missing_count} paragraphs without translation")

        return MergeResult(
            output_path=stats.output_path,
            translated_count=stats.translated_count,
            missing_count=stats.missing_count,
            updated_files=stats.updated_files,
            warnings=warnings,
        )

    def get_translation_prompt(self, block_count: int) -> str:
        return get_translation_prompt(block_count, self.config.target_language)


def create_tagged_pipeline(
    target_language: str = "French",
    source_language: str = "en",
    output_dir: Optional[Path] = None,
) -> TaggedTextPipeline:
    """Factory function to create the tagged text pipeline."""
    config = TaggedConfig(
        target_language=target_language,
        source_language=source_language,
        output_dir=output_dir,
    )
    return TaggedTextPipeline(config)
