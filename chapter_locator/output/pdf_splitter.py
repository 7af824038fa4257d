"""Write page ranges of a PDF out as separate files."""

import os
import math
import hashlib
from typing import Dict, List, Optional, Sequence

import fitz

from ..models.data_structures import ChapterRecord
from ..utils.pdf_utils import PDFUtils

MB = 1024 * 1024


class PDFSplitter:
    """Split a PDF by located chapters or into size-bounded parts"""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    @staticmethod
    def chunk_even(items: Sequence[int], k: int) -> List[List[int]]:
        """Split items into k contiguous chunks of near-equal length, dropping empty ones."""
        n = len(items)
        chunks = [list(items[i * n // k:(i + 1) * n // k]) for i in range(k)]
        return [c for c in chunks if c]

    @staticmethod
    def short_hash(data: bytes) -> str:
        return hashlib.sha256(data).hexdigest()[:8]

    @staticmethod
    def render_part(doc: "fitz.Document", page_idxs: Sequence[int]) -> bytes:
        """Copy the given pages into a new in-memory PDF."""
        part = fitz.open()
        try:
            run_start = prev = None
            for idx in page_idxs:
                if run_start is None:
                    run_start = prev = idx
                elif idx == prev + 1:
                    prev = idx
                else:
                    part.insert_pdf(doc, from_page=run_start, to_page=prev)
                    run_start = prev = idx
            if run_start is not None:
                part.insert_pdf(doc, from_page=run_start, to_page=prev)
            return part.tobytes(garbage=3, deflate=True)
        finally:
            part.close()

    @staticmethod
    def _write(data: bytes, out_dir: str, filename: str) -> str:
        path = os.path.join(out_dir, filename)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    @staticmethod
    def plan_part_count(total_pages: int, total_mb: float, max_part_mb: Optional[float],
                        force_parts: Optional[int]) -> int:
        if force_parts and force_parts > 0:
            return min(force_parts, total_pages)
        if max_part_mb and total_mb > max_part_mb:
            return min(math.ceil(total_mb / max_part_mb), total_pages)
        return 1

    def refine_oversize(self, doc: "fitz.Document", parts: List[Dict], max_bytes: int) -> bool:
        """Halve every oversize part with more than one page. Returns True if any changed."""
        changed = False
        refined = []
        for part in parts:
            pages = part['pages']
            if len(part['data']) > max_bytes and len(pages) > 1:
                mid = len(pages) // 2
                for half in (pages[:mid], pages[mid:]):
                    refined.append({'pages': half, 'data': self.render_part(doc, half)})
                changed = True
            else:
                refined.append(part)
        parts[:] = refined
        return changed

    def split_by_size(self, pdf_path: str, out_dir: str, max_part_mb: Optional[float] = 18,
                      force_parts: Optional[int] = None, max_passes: int = 12) -> List[Dict]:
        """Split into even page chunks, halving parts that exceed max_part_mb."""
        total_mb = os.path.getsize(pdf_path) / MB
        base = os.path.splitext(os.path.basename(pdf_path))[0]
        if self.verbose:
            print(f"Input: {pdf_path} ({total_mb:.2f} MB)")

        doc = PDFUtils.open_document(pdf_path)
        try:
            total_pages = len(doc)
            num_parts = self.plan_part_count(total_pages, total_mb, max_part_mb, force_parts)
            parts = [{'pages': idxs, 'data': self.render_part(doc, idxs)}
                     for idxs in self.chunk_even(list(range(total_pages)), num_parts)]

            if max_part_mb:
                max_bytes = int(max_part_mb * MB)
                passes = 0
                while any(len(p['data']) > max_bytes for p in parts) and passes < max_passes:
                    passes += 1
                    if self.verbose:
                        print(f"Refine pass {passes}...")
                    if not self.refine_oversize(doc, parts, max_bytes):
                        break
        finally:
            doc.close()

        os.makedirs(out_dir, exist_ok=True)
        parts.sort(key=lambda p: min(p['pages']))
        outputs = []
        for i, part in enumerate(parts, start=1):
            hash8 = self.short_hash(part['data'])
            filename = f"{base}.p{total_pages}.part{i:02d}-of-{len(parts):02d}.{hash8}.pdf"
            outputs.append({
                'path': self._write(part['data'], out_dir, filename),
                'size_bytes': len(part['data']),
                'start_page': part['pages'][0] + 1,
                'end_page': part['pages'][-1] + 1,
                'hash8': hash8
            })
            if self.verbose:
                print(f"Part {i:02d}: {len(part['data']) / MB:.2f} MB - pages "
                      f"{part['pages'][0] + 1}-{part['pages'][-1] + 1} - {filename}")
        return outputs

    def split_by_chapters(self, pdf_path: str, chapters: Sequence[ChapterRecord], out_dir: str) -> List[Dict]:
        """Write one PDF per located chapter."""
        base = os.path.splitext(os.path.basename(pdf_path))[0]
        os.makedirs(out_dir, exist_ok=True)
        outputs = []
        doc = PDFUtils.open_document(pdf_path)
        try:
            for record in chapters:
                if record.end_page is None or record.end_page < record.start_page:
                    continue
                data = self.render_part(doc, list(range(record.start_page - 1, record.end_page)))
                hash8 = self.short_hash(data)
                filename = f"{base}.ch{record.number:02d}.{hash8}.pdf"
                outputs.append({
                    'number': record.number,
                    'path': self._write(data, out_dir, filename),
                    'size_bytes': len(data),
                    'start_page': record.start_page,
                    'end_page': record.end_page,
                    'hash8': hash8
                })
                if self.verbose:
                    print(f"Chapter {record.number}: pages {record.start_page}-{record.end_page} -> {filename}")
        finally:
            doc.close()
        return outputs
