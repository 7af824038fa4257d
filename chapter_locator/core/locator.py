"""Sequential chapter location and page range assembly."""

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from ..models.config import DetectorConfig
from ..models.data_structures import ChapterRecord, LocatorState, PageModel, ScoredCandidate
from ..processors.candidate_scorer import CandidateScorer


class ChapterLocator:
    """Greedy, non-backtracking placement of expected chapters in document order.

    Each chapter is scanned from the cursor onward; the first eligible page
    whose best candidate reaches the acceptance threshold is locked in and the
    cursor moves min_page_gap pages past it. A chapter with no such page is
    recorded as missing and the cursor stays where it was.
    """

    def __init__(self, config: Optional[DetectorConfig] = None, scorer: Optional[CandidateScorer] = None,
                 verbose: bool = False):
        self.config = config or DetectorConfig()
        self.scorer = scorer or CandidateScorer(self.config)
        self.verbose = verbose

    def find_start(self, models: Sequence[PageModel], number: int, title: str,
                   cursor: int) -> Optional[Tuple[PageModel, ScoredCandidate]]:
        """First page at or after cursor whose best candidate is accepted."""
        for page in models[max(0, cursor):]:
            if not page.is_eligible:
                continue
            best = self.scorer.best_on_page(page, number, title)
            if best.score >= self.config.accept_threshold:
                return page, best
        return None

    def step(self, state: LocatorState, number: int, models: Sequence[PageModel]) -> LocatorState:
        """Resolve one chapter and return the next state."""
        title = self.config.expected_titles[number - 1]
        found = self.find_start(models, number, title, state.cursor)

        if found is None:
            if self.verbose:
                print(f"  Chapter {number}: no qualifying heading after page {state.cursor + 1}")
            return replace(state, missing=state.missing + (number,))

        page, best = found
        record = ChapterRecord(
            number=number,
            start_page=page.page_number,
            title=best.title or title,
            score=best.score
        )
        if self.verbose:
            print(f"  Chapter {number}: page {record.start_page} (score {best.score:g})")
        return LocatorState(
            cursor=page.index + self.config.min_page_gap,
            results=state.results + (record,),
            missing=state.missing
        )

    def locate(self, models: Sequence[PageModel]) -> LocatorState:
        """Run every expected chapter through step() in order."""
        state = LocatorState()
        for number in range(1, len(self.config.expected_titles) + 1):
            state = self.step(state, number, models)
        return state


def assemble_ranges(records: Sequence[ChapterRecord], total_pages: int) -> List[ChapterRecord]:
    """Backfill end_page: the page before the next start, or the last page."""
    records = list(records)
    for i, record in enumerate(records):
        if i + 1 < len(records):
            record.end_page = records[i + 1].start_page - 1
        else:
            record.end_page = total_pages
    return records


def missing_chapters(expected_count: int, records: Sequence[ChapterRecord]) -> List[int]:
    found = {r.number for r in records}
    return [n for n in range(1, expected_count + 1) if n not in found]
