"""
DOCX Translation Pipelines.

Available pipelines:
- TaggedTextPipeline: JSON + [pN] plain text (default)
- XLIFFPipeline: Additionally generates XLIFF 1.2 for CAT tools
"""

from ..errors import UnsupportedFormatError
from .base import (
    PipelineType,
    PipelineConfig,
    TranslationPipeline,
    ExtractResult,
    MergeResult,
)
from .tagged import (
    TaggedTextPipeline,
    TaggedConfig,
    create_tagged_pipeline,
)
from .xliff_format import (
    XLIFFPipeline,
    XLIFFConfig,
    create_xliff_pipeline,
)


def create_pipeline(
    pipeline_type: PipelineType,
    target_language: str = "French",
    **kwargs,
) -> TranslationPipeline:
    """
    Factory function to create a pipeline by type.

    Args:
        pipeline_type: Type of pipeline to create.
        target_language: Target language for translation.
        **kwargs: Additional pipeline-specific arguments.

    Returns:
        Configured TranslationPipeline instance.
    """
    if pipeline_type == PipelineType.TAGGED:
        return create_tagged_pipeline(
            target_language=target_language,
            **kwargs,
        )
    elif pipeline_type == PipelineType.XLIFF:
        return create_xliff_pipeline(
            target_language=target_language,
            **kwargs,
        )
    else:
        raise UnsupportedFormatError(f"Unknown pipeline type: {pipeline_type}")


__all__ = [
    # Base classes
    "PipelineType",
    "PipelineConfig",
    "TranslationPipeline",
    "ExtractResult",
    "MergeResult",
    # Tagged text
    "TaggedTextPipeline",
    "TaggedConfig",
    "create_tagged_pipeline",
    # XLIFF
    "XLIFFPipeline",
    "XLIFFConfig",
    "create_xliff_pipeline",
    # Factory
    "create_pipeline",
]
