"""Human-readable detection report."""

from typing import List

from ..models.data_structures import DetectionResult


class ReportGenerator:
    """Render a detection result as a plain-text report"""

    @staticmethod
    def chapter_lines(result: DetectionResult) -> List[str]:
        return [
            f"Chapter {r.number}: pages {r.start_page}-{r.end_page} - {r.title}"
            for r in result.chapters
        ]

    @staticmethod
    def format_report(result: DetectionResult) -> str:
        lines = [f"Total pages: {result.total_pages}", "", "DETECTED CHAPTERS", "================="]
        lines.extend(ReportGenerator.chapter_lines(result))
        if result.missing:
            lines.append("")
            lines.append(f"MISSING CHAPTERS: {', '.join(str(n) for n in result.missing)}")
        return '\n'.join(lines)
