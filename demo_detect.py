#!/usr/bin/env python3
"""
Demo script showing how to use the Chapter Locator
"""

import os
from dotenv import load_dotenv
from chapter_locator import ChapterDetector, DetectorConfig, load_titles
from chapter_locator.output import JSONGenerator, ReportGenerator

# Load environment variables from .env file
load_dotenv()

def main():
    # Get paths from environment variables
    pdf_path = os.getenv('PDF_PATH')
    titles_path = os.getenv('TITLES_PATH', 'sample_titles.txt')
    output_dir = os.getenv('OUTPUT_DIR')

    if not pdf_path or not output_dir:
        print("❌ Error: Please set PDF_PATH and OUTPUT_DIR in your .env file")
        return

    config = DetectorConfig(
        expected_titles=load_titles(titles_path),
        min_page_gap=3,
        accept_threshold=8
    )
    detector = ChapterDetector(config)

    try:
        result = detector.detect(pdf_path)

        print(ReportGenerator.format_report(result))

        metadata = JSONGenerator.create_result_metadata(pdf_path, result.total_pages, config)
        results_file = os.path.join(output_dir, 'chapters.json')
        JSONGenerator.write_results(JSONGenerator.build_result_document(result, metadata), results_file)

        print(f"✅ Located {result.found_count} of {len(config.expected_titles)} chapters")
        print(f"📁 Results saved to: {results_file}")

    except Exception as e:
        print(f"❌ Error: {e}")


if __name__ == "__main__":
    main()
