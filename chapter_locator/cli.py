"""Command Line Interface for Chapter Locator."""

import os
import sys
import argparse

from .core.chapter_detector import ChapterDetector
from .models.config import DetectorConfig, load_titles
from .models.exceptions import DocumentLoadError
from .output.json_generator import JSONGenerator
from .output.summary_generator import ReportGenerator
from .output.pdf_splitter import PDFSplitter


def build_parser():
    parser = argparse.ArgumentParser(description='Layout-aware chapter boundary detection')
    subparsers = parser.add_subparsers(dest='command', required=True)

    detect = subparsers.add_parser('detect', help='Locate expected chapters in a PDF')
    detect.add_argument('pdf_path', help='Path to PDF file')
    detect.add_argument('--titles', required=True, help='Expected chapter titles (.json list or one title per line)')
    detect.add_argument('--config', help='JSON file of detector setting overrides')
    detect.add_argument('--min-gap', type=int, help='Minimum pages between consecutive chapter starts')
    detect.add_argument('--threshold', type=int, help='Acceptance score threshold')
    detect.add_argument('--json', dest='json_path', help='Write the structured result to this JSON file')
    detect.add_argument('--split-dir', help='Write one PDF per located chapter into this directory')
    detect.add_argument('--quiet', action='store_true', help='Only print the final report')

    split = subparsers.add_parser('split', help='Split a PDF into size-bounded parts')
    split.add_argument('pdf_path', help='Path to PDF file')
    split.add_argument('--out-dir', default='pdf-parts', help='Output directory (default: pdf-parts)')
    split.add_argument('--max-mb', type=float, default=18, help='Target maximum part size in MB (default: 18)')
    split.add_argument('--parts', type=int, help='Exact number of even parts, ignoring --max-mb for the initial plan')

    return parser


def run_detect(args) -> int:
    try:
        config = DetectorConfig.from_file(args.config) if args.config else DetectorConfig()
        config = config.with_overrides(
            expected_titles=load_titles(args.titles),
            min_page_gap=args.min_gap,
            accept_threshold=args.threshold
        )
        detector = ChapterDetector(config, verbose=not args.quiet)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}")
        return 1

    try:
        result = detector.detect(args.pdf_path)
    except (FileNotFoundError, DocumentLoadError) as e:
        print(f"Error: {e}")
        return 1

    print()
    print(ReportGenerator.format_report(result))

    if args.json_path:
        metadata = JSONGenerator.create_result_metadata(args.pdf_path, result.total_pages, config)
        path = JSONGenerator.write_results(JSONGenerator.build_result_document(result, metadata), args.json_path)
        print(f"\nResults saved to: {path}")

    if args.split_dir:
        PDFSplitter(verbose=not args.quiet).split_by_chapters(args.pdf_path, result.chapters, args.split_dir)

    return 0


def run_split(args) -> int:
    try:
        PDFSplitter().split_by_size(
            args.pdf_path,
            args.out_dir,
            max_part_mb=args.max_mb,
            force_parts=args.parts
        )
    except (FileNotFoundError, DocumentLoadError) as e:
        print(f"Error: {e}")
        return 1
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.pdf_path):
        print(f"Error: PDF file not found: {args.pdf_path}")
        return 1

    if args.command == 'detect':
        return run_detect(args)
    return run_split(args)


if __name__ == "__main__":
    sys.exit(main())
