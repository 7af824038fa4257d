"""JSON output generation utilities."""

import os
import json
import datetime
import hashlib
from typing import Any, Dict, Optional
from dataclasses import asdict

from ..models.config import DetectorConfig
from ..models.data_structures import DetectionResult

PROCESSING_VERSION = "1.0.0"


class JSONGenerator:
    """JSON output generation utilities"""

    @staticmethod
    def create_result_metadata(pdf_path: Optional[str], total_pages: int, config: DetectorConfig) -> Dict:
        """Create document-level metadata block."""
        source = pdf_path or ''
        metadata = {
            'book_id': hashlib.md5(source.encode()).hexdigest()[:16],
            'source_pdf': os.path.basename(source) if source else None,
            'source_path': source or None,
            'total_pages': total_pages,
            'processing_timestamp': datetime.datetime.now().isoformat(),
            'processing_version': PROCESSING_VERSION,
            'processing_parameters': {
                'accept_threshold': config.accept_threshold,
                'min_page_gap': config.min_page_gap,
                'similarity_threshold': config.similarity_threshold,
                'header_footer_min_repeats': config.header_footer_min_repeats,
                'marker_words': list(config.marker_words)
            }
        }
        return metadata

    @staticmethod
    def build_result_document(result: DetectionResult, metadata: Dict) -> Dict[str, Any]:
        chapters = []
        for record in result.chapters:
            entry = asdict(record)
            entry['expected_title'] = result.expected_titles[record.number - 1] if record.number <= len(result.expected_titles) else None
            entry['page_count'] = record.page_count
            chapters.append(entry)

        return {
            'metadata': metadata,
            'chapters': chapters,
            'missing': list(result.missing),
            'statistics': {
                'expected_chapters': len(result.expected_titles),
                'found_chapters': result.found_count,
                'missing_chapters': len(result.missing)
            }
        }

    @staticmethod
    def write_results(document: Dict[str, Any], output_path: str) -> str:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        return output_path
