"""
RFP Analyzer: Data Models
Typed records produced by the analysis core

Every record is frozen. Consumers that want to edit a requirement work on a
copy (see AnalysisResult.with_requirement); nothing flows back into the core.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

PAGE_SEPARATOR = "\n\n"


class Criticality(str, Enum):
    """Obligation strength of a requirement"""
    MANDATORY = "Mandatory"          # must / shall / mandatory
    RECOMMENDED = "Recommended"      # should
    OPTIONAL = "Optional"            # may / optional, and the default
    NICE_TO_HAVE = "Nice-to-Have"    # Only assigned by downstream editors


class InsightLabel(str, Enum):
    """Closed set of labels the insight extractor can emit"""
    ADVERTISER = "Advertiser"
    AGENCY = "Agency"
    BUDGET = "Budget"
    DEADLINE = "Deadline"
    TARGET_DEMOGRAPHICS = "Target Demographics"


@dataclass(frozen=True)
class DocumentMetadata:
    """Metadata reported by the document reader"""
    title: str = "Untitled"
    author: str = "Unknown"
    creation_date: datetime = field(default_factory=datetime.now)
    page_count: int = 1

    def __post_init__(self):
        if self.page_count < 1:
            raise ValueError(f"page_count must be positive, got {self.page_count}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "creation_date": self.creation_date.isoformat(),
            "page_count": self.page_count,
        }


@dataclass(frozen=True)
class DocumentPage:
    """Plain text of one page (1-indexed)"""
    page_number: int
    text: str


@dataclass(frozen=True)
class ReadDocument:
    """What a DocumentReader hands to the analyzer"""
    pages: Tuple[DocumentPage, ...]
    metadata: DocumentMetadata

    @property
    def full_text(self) -> str:
        """Page texts, each followed by a blank-line separator (the last one included)."""
        return "".join(page.text + PAGE_SEPARATOR for page in self.pages)


@dataclass(frozen=True)
class Section:
    """One entry of the flat section outline"""
    title: str
    level: int                  # 1 = all-caps heading, 2 = colon-terminated
    content: str = ""
    start_page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "level": self.level,
            "content": self.content,
            "start_page": self.start_page,
        }


@dataclass(frozen=True)
class Requirement:
    """A classified requirement paragraph"""
    id: str                              # REQ-001, REQ-002, ...
    description: str
    criticality: Criticality = Criticality.OPTIONAL
    deadline: str = ""
    page_reference: str = "N/A"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "criticality": self.criticality.value,
            "deadline": self.deadline,
            "page_reference": self.page_reference,
        }


@dataclass(frozen=True)
class Insight:
    """A labeled fact such as 'Budget: $50,000'"""
    label: InsightLabel
    value: str

    def __str__(self) -> str:
        return f"{self.label.value}: {self.value}"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete analysis of one RFP document

    Created once per analyze() call and never mutated afterwards.
    """
    text: str
    metadata: DocumentMetadata
    sections: Tuple[Section, ...] = ()
    questions: Tuple[str, ...] = ()
    requirements: Tuple[Requirement, ...] = ()
    insights: Tuple[Insight, ...] = ()
    file_type: str = ""
    summary: str = ""

    def get_requirement(self, requirement_id: str) -> Optional[Requirement]:
        for req in self.requirements:
            if req.id == requirement_id:
                return req
        return None

    def with_requirement(self, updated: Requirement) -> "AnalysisResult":
        """
        Return a copy with the requirement sharing updated.id replaced.

        Raises KeyError when no requirement carries that id.
        """
        if self.get_requirement(updated.id) is None:
            raise KeyError(updated.id)
        requirements = tuple(
            updated if req.id == updated.id else req
            for req in self.requirements
        )
        return replace(self, requirements=requirements)

    def requirements_by_criticality(self) -> Dict[Criticality, List[Requirement]]:
        """Group requirements by criticality, keeping extraction order."""
        grouped: Dict[Criticality, List[Requirement]] = {c: [] for c in Criticality}
        for req in self.requirements:
            grouped[req.criticality].append(req)
        return grouped

    def executive_summary(self) -> str:
        """Longer summary built from the key sections of the full text."""
        from .summary import generate_executive_summary, identify_key_sections
        return generate_executive_summary(identify_key_sections(self.text))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_type": self.file_type,
            "metadata": self.metadata.to_dict(),
            "summary": self.summary,
            "sections": [s.to_dict() for s in self.sections],
            "questions": list(self.questions),
            "requirements": [r.to_dict() for r in self.requirements],
            "insights": [str(i) for i in self.insights],
        }
