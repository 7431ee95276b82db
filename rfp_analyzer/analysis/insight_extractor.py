"""
RFP Analyzer: Insight Extractor
Pulls a handful of labeled facts (advertiser, agency, budget, ...) from RFP text
"""

import logging
import re
from typing import List, Sequence, Tuple

from .models import Insight, InsightLabel
from .text_utils import compile_pattern

logger = logging.getLogger(__name__)


# Declaration order is emission order
INSIGHT_PATTERNS: Sequence[Tuple[InsightLabel, re.Pattern]] = (
    (InsightLabel.ADVERTISER, compile_pattern(r"advertiser[:\s]+([A-Za-z0-9\s&]+)", re.IGNORECASE)),
    (InsightLabel.AGENCY, compile_pattern(r"agency[:\s]+([A-Za-z0-9\s&]+)", re.IGNORECASE)),
    (InsightLabel.BUDGET, compile_pattern(r"budget[:\s]+([$€£]?[0-9,.]+\s*[kKmMbB]?)", re.IGNORECASE)),
    (InsightLabel.DEADLINE, compile_pattern(r"deadline[:\s]+([A-Za-z0-9\s,]+)", re.IGNORECASE)),
    (InsightLabel.TARGET_DEMOGRAPHICS, compile_pattern(r"target\s+(?:audience|demographics)[:\s]+([^.]+)", re.IGNORECASE)),
)


class InsightExtractor:
    """
    Apply each labeled pattern to the text and keep its first match.

    Labels that never match are left out of the result.
    """

    def __init__(self, patterns: Sequence[Tuple[InsightLabel, re.Pattern]] = INSIGHT_PATTERNS):
        self.patterns = patterns

    def extract(self, text: str) -> List[Insight]:
        insights = []
        for label, pattern in self.patterns:
            match = pattern.search(text)
            if not match:
                continue
            # A blank capture still counts as a match
            insights.append(Insight(label=label, value=match.group(1).strip()))

        logger.debug(f"Extracted {len(insights)} insights")
        return insights


def extract_insights(text: str) -> List[Insight]:
    return InsightExtractor().extract(text)
