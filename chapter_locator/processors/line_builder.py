"""Reconstruct reading-order text lines from positioned fragments."""

from typing import Any, Dict, Iterable, List, Optional

from ..models.data_structures import Fragment, Line
from ..utils.text_processor import TextProcessor


class LineReconstructor:
    """Group a page's fragments into lines by quantized vertical position"""

    def __init__(self, y_tolerance: float = 2.0):
        self.y_tolerance = y_tolerance

    def bucket_key(self, y: float) -> float:
        return round(y / self.y_tolerance) * self.y_tolerance

    def build_lines(self, fragments: Iterable[Fragment]) -> List[Line]:
        """Merge fragments sharing a y bucket into lines sorted by y ascending."""
        buckets: Dict[float, List[Fragment]] = {}
        for fragment in fragments:
            buckets.setdefault(self.bucket_key(fragment.y), []).append(fragment)

        lines = []
        for key, members in buckets.items():
            members.sort(key=lambda f: f.x)
            text = TextProcessor.clean(' '.join(f.text for f in members))
            if not text:
                continue
            lines.append(Line(
                y=key,
                text=text,
                font_max=max(f.font_size for f in members),
                x0=members[0].x,
                x1=members[-1].x
            ))

        lines.sort(key=lambda line: line.y)
        return lines

    def build_lines_from_transforms(self, items: Iterable[Dict[str, Any]],
                                    page_height: Optional[float] = None) -> List[Line]:
        """Build lines from raw records carrying a bottom-up 'transform' and a 'str'."""
        fragments = [Fragment.from_transform(item.get('transform'), item.get('str'), page_height)
                     for item in items]
        return self.build_lines(fragments)
