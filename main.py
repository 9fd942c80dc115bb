#!/usr/bin/env python3
"""
DOCX Layout-Preserving Translation Tool.

Supports two translation pipelines:
- tagged (default): JSON translation file + [pN] plain text for LLMs
- xliff: Additionally generate XLIFF 1.2 for professional CAT tools

Two-stage workflow:
  1. extract input.docx  -> generates input.json + input.txt
  2. merge input.docx input.txt  -> rebuilds input_translated.docx
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docx_layout.errors import DocxLayoutError
from docx_layout.package import describe_package, read_package
from docx_layout.pipelines import PipelineType, create_pipeline


# Map CLI names to pipeline types
PIPELINE_MAP = {
    "tagged": PipelineType.TAGGED,
    "txt": PipelineType.TAGGED,
    "1": PipelineType.TAGGED,
    "xliff": PipelineType.XLIFF,
    "2": PipelineType.XLIFF,
}


def _create_pipeline(args: argparse.Namespace):
    pipeline_type = PIPELINE_MAP.get(args.pipeline.lower(), PipelineType.TAGGED)
    return create_pipeline(
        pipeline_type,
        target_language=args.language,
        source_language=args.source_language,
    )


def info_command(args: argparse.Namespace) -> int:
    """Show translatable parts of a DOCX."""
    input_path = Path(args.input_docx)

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        info = describe_package(read_package(input_path))
    except (DocxLayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("DOCX Package")
    print("=" * 50)
    print(f"File: {input_path}")
    print(f"Entries: {info.entry_count}")
    print(f"Translatable parts: {len(info.translatable_files)}")
    for path in info.translatable_files:
        print(f"  - {path}: {info.segment_counts[path]} paragraphs")
    print(f"Total paragraphs: {info.total_segments}")
    print()
    print(f"  → Use: python main.py extract {input_path}")

    return 0


def extract_command(args: argparse.Namespace) -> int:
    """Extract paragraphs and generate translation files."""
    input_path = Path(args.input_docx)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    translation_path = Path(args.output_json) if args.output_json else None

    try:
        pipeline = _create_pipeline(args)

        print(f"Pipeline: {pipeline.name}")
        print(f"Extracting: {input_path}")

        result = pipeline.extract(input_path, translation_path)

        print(f"  Extracted {result.segment_count} paragraphs")
        print(f"  Translation file: {result.translation_path}")
        print(f"  Plain text: {result.translate_path}")

        for name, path in result.extra_files.items():
            print(f"  {name.upper()}: {path}")

        print()
        print("=" * 60)
        print("LLM PROMPT (copy this):")
        print("=" * 60)
        print(pipeline.get_translation_prompt(result.segment_count))
        print("=" * 60)
        print()
        print(f"Next: Fill in \"translation\" fields in {result.translation_path.name}")
        print(f"      or translate {result.translate_path.name}")
        print(f"Then: python main.py merge {input_path} {result.translate_path}")

        return 0

    except (DocxLayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def merge_command(args: argparse.Namespace) -> int:
    """Merge translations and rebuild the DOCX."""
    input_path = Path(args.input_docx)
    translated_path = Path(args.translations)

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    if not translated_path.exists():
        print(f"Error: Translations not found: {translated_path}", file=sys.stderr)
        return 1

    try:
        pipeline = _create_pipeline(args)
        paths = pipeline.derive_paths(input_path)

        original_path = Path(args.original) if args.original else paths["translation"]
        output_path = Path(args.output_docx) if args.output_docx else paths["output"]

        print(f"Pipeline: {pipeline.name}")
        print(f"Original DOCX: {input_path}")
        print(f"Translations: {translated_path}")

        result = pipeline.merge(
            input_path=input_path,
            output_path=output_path,
            translated_path=translated_path,
            original_path=original_path,
        )

        print(
            f"  Found {result.translated_count} translations "
            f"({result.missing_count} paragraphs without translation)"
        )
        for part_path in result.updated_files:
            print(f"  - Updated: {part_path}")

        for warning in result.warnings:
            print(f"  Warning: {warning}")

        print(f"Done: {result.output_path}")
        return 0

    except (DocxLayoutError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DOCX Layout-Preserving Translation Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pipelines:
  tagged (1)   JSON translation file + [pN] plain text (default)
  xliff (2)    Additionally generate XLIFF 1.2 for CAT tools

Workflow:
  1. python main.py info input.docx
     Shows translatable parts and paragraph counts

  2. python main.py extract input.docx -l Spanish
     Creates: input.json, input.txt

  3. Translate input.txt (or fill in "translation" fields in input.json)

  4. python main.py merge input.docx input.txt
     Creates: input_translated.docx

Examples:
  # XLIFF for CAT tools
  python main.py extract document.docx --pipeline xliff -l German
  python main.py merge document.docx document.xlf translated.docx
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show translatable parts of a DOCX",
    )
    info_parser.add_argument("input_docx", help="Input DOCX file")
    info_parser.set_defaults(func=info_command)

    pipeline_help = "Translation pipeline: tagged/txt/1 (default), xliff/2"

    # Extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract paragraphs and generate translation files",
    )
    extract_parser.add_argument("input_docx", help="Input DOCX file")
    extract_parser.add_argument(
        "output_json",
        nargs="?",
        help="Output JSON file (default: <input>.json)",
    )
    _add_common_options(extract_parser, pipeline_help)
    extract_parser.set_defaults(func=extract_command)

    # Merge command
    merge_parser = subparsers.add_parser(
        "merge",
        aliases=["inject"],
        help="Merge translations and rebuild the DOCX",
    )
    merge_parser.add_argument("input_docx", help="Original input DOCX file")
    merge_parser.add_argument(
        "translations",
        help="Translations file (.json, .txt or .xlf)",
    )
    merge_parser.add_argument(
        "output_docx",
        nargs="?",
        help="Output DOCX file (default: <input>_translated.docx)",
    )
    merge_parser.add_argument(
        "--original",
        type=str,
        default=None,
        help="JSON file written by extract (default: <input>.json)",
    )
    _add_common_options(merge_parser, pipeline_help)
    merge_parser.set_defaults(func=merge_command)

    return parser


def _add_common_options(parser: argparse.ArgumentParser, pipeline_help: str) -> None:
    parser.add_argument(
        "--pipeline", "-p",
        type=str,
        default="tagged",
        choices=list(PIPELINE_MAP),
        help=pipeline_help,
    )
    parser.add_argument(
        "-l", "--language",
        default="French",
        help="Target language (default: French)",
    )
    parser.add_argument(
        "--source-language",
        type=str,
        default="en",
        help="Source language code (default: en)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
