"""
RFP Analyzer: Requirement Extractor
Keyword-driven requirement detection with criticality classification

A paragraph is a requirement when it uses obligation language. Each one gets
a sequential id (REQ-001, REQ-002, ...), a criticality, and a deadline when
the paragraph names one ("by June 30, 2025").
"""

import logging
import re
from typing import Callable, List, Sequence, Tuple

from .models import Criticality, Requirement
from .text_utils import compile_pattern, split_paragraphs

logger = logging.getLogger(__name__)


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def predicate(lowered: str) -> bool:
        return any(keyword in lowered for keyword in keywords)
    return predicate


class RequirementExtractor:
    """
    Extract requirements from the full text of an RFP.

    Matching is plain substring search on the lowercased paragraph, so
    'must' also matches 'mustard' and 'may' matches 'mayor'. That is the
    behavior downstream consumers rely on.
    """

    # Paragraph must contain one of these to be a requirement
    REQUIREMENT_KEYWORDS = ["must", "shall", "required", "mandatory", "requirement"]

    # (predicate on lowercased text, outcome) - first match wins
    CRITICALITY_RULES: Sequence[Tuple[Callable[[str], bool], Criticality]] = (
        (_contains_any("must", "shall", "mandatory"), Criticality.MANDATORY),
        (_contains_any("should"), Criticality.RECOMMENDED),
        (_contains_any("may", "optional"), Criticality.OPTIONAL),
    )
    DEFAULT_CRITICALITY = Criticality.OPTIONAL

    DEADLINE_PATTERN = compile_pattern(r"by\s+(\w+\s+\d{1,2},\s+\d{4})", re.IGNORECASE)

    ID_PREFIX = "REQ"
    PAGE_REFERENCE = "N/A"

    def extract(self, text: str) -> List[Requirement]:
        requirements = []
        # Counter is local to this call; ids are never shared between runs
        next_id = 1

        for paragraph in split_paragraphs(text):
            if not self.is_requirement(paragraph):
                continue

            requirements.append(Requirement(
                id=self.format_id(next_id),
                description=paragraph,
                criticality=self.classify_criticality(paragraph),
                deadline=self.extract_deadline(paragraph),
                page_reference=self.PAGE_REFERENCE,
            ))
            next_id += 1

        logger.debug(f"Extracted {len(requirements)} requirements")
        return requirements

    def is_requirement(self, paragraph: str) -> bool:
        lowered = paragraph.lower()
        return any(keyword in lowered for keyword in self.REQUIREMENT_KEYWORDS)

    def classify_criticality(self, paragraph: str) -> Criticality:
        lowered = paragraph.lower()
        for predicate, criticality in self.CRITICALITY_RULES:
            if predicate(lowered):
                return criticality
        return self.DEFAULT_CRITICALITY

    def extract_deadline(self, paragraph: str) -> str:
        """Return the 'Month D, YYYY' phrase following 'by', or ''."""
        match = self.DEADLINE_PATTERN.search(paragraph)
        return match.group(1) if match else ""

    def format_id(self, number: int) -> str:
        return f"{self.ID_PREFIX}-{number:03d}"


def extract_requirements(text: str) -> List[Requirement]:
    return RequirementExtractor().extract(text)
