"""
RFP Analyzer
Rule-based analysis of Request for Proposal documents
"""

__version__ = "1.0.0"

from .analysis import (
    AnalysisResult,
    Criticality,
    DocumentAnalyzer,
    DocumentReadError,
    UnsupportedFormatError,
    analyze,
)
from .parsing import DocumentParser, DocumentReader

__all__ = [
    "AnalysisResult",
    "Criticality",
    "DocumentAnalyzer",
    "DocumentReadError",
    "UnsupportedFormatError",
    "analyze",
    "DocumentParser",
    "DocumentReader",
]
