"""
RFP Analyzer: Section Outliner
Groups page lines into a flat, ordered section outline

Header heuristic:
- Short line (< 100 chars) with no lowercase letters -> level 1
- Short line ending with ':' -> level 2
Everything else is content for the most recently opened section. Lines seen
before the first header are dropped.
"""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .models import DocumentPage, Section
from .text_utils import split_lines

logger = logging.getLogger(__name__)


PageInput = Union[DocumentPage, Tuple[int, str]]


@dataclass
class _OutlineState:
    """Accumulator threaded through the line scan of a single outline() call"""
    sections: List[Section] = field(default_factory=list)
    title: Optional[str] = None
    level: int = 0
    start_page: int = 0
    content: List[str] = field(default_factory=list)

    def close_current(self) -> None:
        if self.title is not None:
            self.sections.append(Section(
                title=self.title,
                level=self.level,
                content="".join(self.content),
                start_page=self.start_page,
            ))

    def open(self, title: str, level: int, page_number: int) -> None:
        self.close_current()
        self.title = title
        self.level = level
        self.start_page = page_number
        self.content = []


class SectionOutliner:
    """
    Build the section outline of a document from its pages.

    Usage:
        outliner = SectionOutliner()
        sections = outliner.outline([(1, "INTRODUCTION\\nThis project...")])
    """

    MAX_HEADER_LENGTH = 100    # Lines this long or longer are ignored entirely

    def outline(self, pages: Iterable[PageInput]) -> List[Section]:
        lines = (
            (page_number, line)
            for page_number, text in self._normalize_pages(pages)
            for line in split_lines(text)
        )
        state = reduce(self._consume_line, lines, _OutlineState())
        state.close_current()

        logger.debug(f"Outlined {len(state.sections)} sections")
        return state.sections

    def header_level(self, line: str) -> Optional[int]:
        """
        Return 1 or 2 when the trimmed line is a section header, else None.

        The uppercase test runs first, so 'BUDGET:' is level 1.
        """
        if line.upper() == line:
            return 1
        if line.endswith(":"):
            return 2
        return None

    def _consume_line(self, state: _OutlineState, item: Tuple[int, str]) -> _OutlineState:
        page_number, line = item
        if not line or len(line) >= self.MAX_HEADER_LENGTH:
            return state

        level = self.header_level(line)
        if level is not None:
            state.open(line, level, page_number)
        elif state.title is not None:
            state.content.append(line + "\n")
        return state

    @staticmethod
    def _normalize_pages(pages: Iterable[PageInput]) -> Sequence[Tuple[int, str]]:
        normalized = []
        for page in pages:
            if isinstance(page, DocumentPage):
                normalized.append((page.page_number, page.text))
            else:
                page_number, text = page
                normalized.append((page_number, text))
        return normalized


def outline_sections(pages: Iterable[PageInput]) -> List[Section]:
    """Outline pages with a fresh SectionOutliner."""
    return SectionOutliner().outline(pages)
