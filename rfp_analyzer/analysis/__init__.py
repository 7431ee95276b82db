"""
RFP Analyzer - Analysis Core

Rule-based outlining, question detection, requirement extraction and
insight extraction over the plain text of an RFP.
"""

from .models import (
    Criticality, InsightLabel, DocumentMetadata, DocumentPage, ReadDocument,
    Section, Requirement, Insight, AnalysisResult,
)
from .section_outliner import SectionOutliner, outline_sections
from .question_detector import QuestionDetector, QuestionKind, QuestionMatch, identify_questions
from .extractor import RequirementExtractor, extract_requirements
from .insight_extractor import InsightExtractor, INSIGHT_PATTERNS, extract_insights
from .summary import build_overview, identify_key_sections, generate_executive_summary
from .analyzer import (
    DocumentAnalyzer, analyze, SUPPORTED_FILE_TYPES,
    AnalysisError, UnsupportedFormatError, DocumentReadError,
)

__all__ = [
    # Models
    "Criticality",
    "InsightLabel",
    "DocumentMetadata",
    "DocumentPage",
    "ReadDocument",
    "Section",
    "Requirement",
    "Insight",
    "AnalysisResult",
    # Components
    "SectionOutliner",
    "outline_sections",
    "QuestionDetector",
    "QuestionKind",
    "QuestionMatch",
    "identify_questions",
    "RequirementExtractor",
    "extract_requirements",
    "InsightExtractor",
    "INSIGHT_PATTERNS",
    "extract_insights",
    "build_overview",
    "identify_key_sections",
    "generate_executive_summary",
    # Orchestration
    "DocumentAnalyzer",
    "analyze",
    "SUPPORTED_FILE_TYPES",
    "AnalysisError",
    "UnsupportedFormatError",
    "DocumentReadError",
]
