"""
XLIFF Pipeline - Generate industry-standard XLIFF alongside the tagged files.

XLIFF (XML Localization Interchange File Format) is an XML-based format
for exchanging localization data between tools. The XLIFF 1.2 file is
written with translate-toolkit, compatible with:
- SDL Trados
- memoQ
- OmegaT
- Other CAT (Computer-Assisted Translation) tools
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .base import PipelineType, ExtractResult
from .tagged import TaggedConfig, TaggedTextPipeline
from ..models import TranslationFile
from ..translation_io import generate_xliff


@dataclass
class XLIFFConfig(TaggedConfig):
    """Configuration specific to XLIFF pipeline."""

    pipeline_type: PipelineType = PipelineType.XLIFF


class XLIFFPipeline(TaggedTextPipeline):
    """
    XLIFF Format Pipeline.

    Workflow:
    1. Extract paragraph segments from the DOCX
    2. Generate XLIFF file with one trans-unit per segment (id = pN)
    3. Translator/CAT tool fills in <target> elements
    4. Merge reads targets back by trans-unit id and rebuilds the DOCX
    """

    def __init__(self, config: XLIFFConfig):
        super().__init__(config)
        self.config: XLIFFConfig = config

    @property
    def name(self) -> str:
        return "XLIFF Format"

    @property
    def description(self) -> str:
        return "Generate XLIFF 1.2 for professional CAT tools"

    def _write_extra_files(
        self,
        translation_file: TranslationFile,
        paths: dict[str, Path],
        result: ExtractResult,
    ) -> None:
        xliff_path = paths["translation"].with_suffix(".xlf")
        generate_xliff(
            translation_file,
            xliff_path,
            source_language=self.config.source_language,
            target_language=self.config.target_language,
        )
        result.extra_files["xliff"] = xliff_path

    def get_translation_prompt(self, block_count: int) -> str:
        return (
            f"Open the XLIFF file in a CAT tool and translate {block_count} "
            f"units to {self.config.target_language}.\n"
            f"Keep every trans-unit id unchanged; fill in <target> only."
        )


def create_xliff_pipeline(
    target_language: str = "French",
    source_language: str = "en",
    output_dir: Optional[Path] = None,
) -> XLIFFPipeline:
    """Factory function to create XLIFF pipeline."""
    config = XLIFFConfig(
        target_language=target_language,
        source_language=source_language,
        output_dir=output_dir,
    )
    return XLIFFPipeline(config)
