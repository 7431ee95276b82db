"""
RFP Analyzer: Document Analyzer
Orchestrates reading, outlining and extraction for one RFP document

Pipeline:
1. Validate the format tag (pdf / docx)
2. Ask the DocumentReader for page texts and metadata
3. Outline sections page by page
4. Detect questions, extract requirements and insights from the full text
5. Assemble an immutable AnalysisResult
"""

import logging
from typing import TYPE_CHECKING, Optional

from .extractor import RequirementExtractor
from .insight_extractor import InsightExtractor
from .models import AnalysisResult, ReadDocument
from .question_detector import QuestionDetector
from .section_outliner import SectionOutliner
from .summary import build_overview

if TYPE_CHECKING:
    from ..parsing.document_parser import DocumentReader

logger = logging.getLogger(__name__)


SUPPORTED_FILE_TYPES = ("pdf", "docx")


class AnalysisError(Exception):
    """Base class for failures of an analyze() call"""
    pass


class UnsupportedFormatError(AnalysisError, ValueError):
    """Raised when the format tag is not one of SUPPORTED_FILE_TYPES"""

    def __init__(self, file_type: str):
        self.file_type = file_type
        super().__init__(
            f"Unsupported file type: {file_type!r} "
            f"(expected one of {', '.join(SUPPORTED_FILE_TYPES)})"
        )


class DocumentReadError(AnalysisError):
    """
    Raised when the document reader could not decode the source bytes.

    The original exception is kept on .cause and chained as __cause__.
    """

    def __init__(self, file_type: str, cause: BaseException):
        self.file_type = file_type
        self.cause = cause
        super().__init__(f"Failed to process {file_type.upper()} document: {cause}")


class DocumentAnalyzer:
    """
    Drive the analysis components over one document.

    Usage:
        analyzer = DocumentAnalyzer(DocumentParser())
        result = analyzer.analyze(pdf_bytes, "pdf")
        for req in result.requirements:
            print(req.id, req.criticality.value)

    The analyzer holds no per-document state, so one instance can serve any
    number of (concurrent) analyze() calls.
    """

    def __init__(
        self,
        reader: "DocumentReader",
        outliner: Optional[SectionOutliner] = None,
        question_detector: Optional[QuestionDetector] = None,
        requirement_extractor: Optional[RequirementExtractor] = None,
        insight_extractor: Optional[InsightExtractor] = None,
    ):
        self.reader = reader
        self.outliner = outliner or SectionOutliner()
        self.question_detector = question_detector or QuestionDetector()
        self.requirement_extractor = requirement_extractor or RequirementExtractor()
        self.insight_extractor = insight_extractor or InsightExtractor()

    def analyze(self, file_buffer: bytes, file_type: str) -> AnalysisResult:
        if file_type not in SUPPORTED_FILE_TYPES:
            logger.error(f"Rejected unsupported file type: {file_type!r}")
            raise UnsupportedFormatError(file_type)

        document = self._read(file_buffer, file_type)
        return self.analyze_document(document, file_type)

    def analyze_document(self, document: ReadDocument, file_type: str = "") -> AnalysisResult:
        """Run the text passes over an already-decoded document."""
        full_text = document.full_text

        sections = self.outliner.outline(document.pages)
        questions = self.question_detector.detect(full_text)
        requirements = self.requirement_extractor.extract(full_text)
        insights = self.insight_extractor.extract(full_text)

        logger.info(
            f"Analyzed '{document.metadata.title}' ({document.metadata.page_count} pages): "
            f"{len(sections)} sections, {len(questions)} questions, "
            f"{len(requirements)} requirements, {len(insights)} insights"
        )

        return AnalysisResult(
            text=full_text,
            metadata=document.metadata,
            sections=tuple(sections),
            questions=tuple(questions),
            requirements=tuple(requirements),
            insights=tuple(insights),
            file_type=file_type,
            summary=build_overview(document.metadata, len(questions), len(requirements)),
        )

    def _read(self, file_buffer: bytes, file_type: str) -> ReadDocument:
        logger.debug(f"Reading {len(file_buffer)} bytes as {file_type}")
        try:
            return self.reader.read(file_buffer, file_type)
        except Exception as exc:
            logger.error(f"Error processing {file_type.upper()}: {exc}")
            raise DocumentReadError(file_type, exc) from exc


def analyze(reader: "DocumentReader", file_buffer: bytes, file_type: str) -> AnalysisResult:
    """Analyze one document with the default components."""
    return DocumentAnalyzer(reader).analyze(file_buffer, file_type)
