"""
RFP Analyzer: Summary Builder
Short overview line plus an executive summary assembled from key RFP sections
"""

import re
from typing import Dict, List, Tuple

from .models import DocumentMetadata
from .text_utils import PARAGRAPH_SEPARATOR, compile_pattern

EXCERPT_LENGTH = 100

# (section name, pattern locating it) - first matching paragraph wins
KEY_SECTION_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ("Scope of Work", compile_pattern(r"scope\s+of\s+work", re.IGNORECASE)),
    ("Requirements", compile_pattern(r"requirements", re.IGNORECASE)),
    ("Evaluation Criteria", compile_pattern(r"evaluation\s+criteria", re.IGNORECASE)),
    ("Timeline", compile_pattern(r"timeline", re.IGNORECASE)),
    ("Budget", compile_pattern(r"budget", re.IGNORECASE)),
]

_SCOPE_HEADING = compile_pattern(r"scope\s+of\s+work[:\s]*", re.IGNORECASE)

# (section name, lead-in, heading prefix stripped from the excerpt, closing)
_SUMMARY_CLAUSES = [
    ("Requirements", "Key requirements include ", compile_pattern(r"requirements[:\s]*", re.IGNORECASE), ". "),
    ("Timeline", "The project timeline indicates ", compile_pattern(r"timeline[:\s]*", re.IGNORECASE), ". "),
    ("Budget", "Budget considerations include ", compile_pattern(r"budget[:\s]*", re.IGNORECASE), ". "),
    ("Evaluation Criteria", "Proposals will be evaluated based on ", compile_pattern(r"evaluation\s+criteria[:\s]*", re.IGNORECASE), "."),
]


def build_overview(metadata: DocumentMetadata, question_count: int, requirement_count: int) -> str:
    """One-line description of the analyzed document."""
    return (
        f'This is an RFP document titled "{metadata.title}" with {metadata.page_count} pages. '
        f"It contains {question_count} questions and {requirement_count} requirements."
    )


def identify_key_sections(text: str) -> Dict[str, str]:
    """
    Locate the common RFP sections in the text.

    For each known section the first paragraph mentioning it is taken,
    together with the paragraph that follows it.
    """
    paragraphs = text.split(PARAGRAPH_SEPARATOR)
    sections = {}

    for name, pattern in KEY_SECTION_PATTERNS:
        for index, paragraph in enumerate(paragraphs):
            if pattern.search(paragraph):
                following = paragraphs[index + 1] if index + 1 < len(paragraphs) else ""
                sections[name] = paragraph + (PARAGRAPH_SEPARATOR + following if following else "")
                break

    return sections


def _excerpt(section_text: str, heading: re.Pattern) -> str:
    return heading.sub("", section_text[:EXCERPT_LENGTH], count=1)


def generate_executive_summary(sections: Dict[str, str]) -> str:
    summary = "This RFP requests proposals for "

    if sections.get("Scope of Work"):
        summary += _excerpt(sections["Scope of Work"], _SCOPE_HEADING) + ". "
    else:
        summary += "services as detailed in the document. "

    for name, lead_in, heading, closing in _SUMMARY_CLAUSES:
        if sections.get(name):
            summary += lead_in + _excerpt(sections[name], heading) + closing

    return summary
