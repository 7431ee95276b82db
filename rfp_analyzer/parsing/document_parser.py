"""
RFP Analyzer Document Parser
Turns PDF / DOCX bytes into page texts plus metadata for the analysis core
"""

import io
import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from docx import Document

from ..analysis.models import DocumentMetadata, DocumentPage, ReadDocument
from ..core.config import ReaderConfig, get_config
from .pdf_parser import PDFParser

logger = logging.getLogger(__name__)


class DocumentReader(ABC):
    """
    Collaborator that decodes source bytes for the DocumentAnalyzer.

    Implementations return the pages in order together with the document
    metadata, or raise any exception when the bytes cannot be decoded.
    """

    @abstractmethod
    def read(self, content: bytes, file_type: str) -> ReadDocument:
        ...


def build_metadata(
    title: Optional[str],
    author: Optional[str],
    creation_date: Optional[datetime],
    page_count: int,
) -> DocumentMetadata:
    """Apply the Untitled / Unknown / now() defaults to reader metadata."""
    return DocumentMetadata(
        title=(title or "").strip() or "Untitled",
        author=(author or "").strip() or "Unknown",
        creation_date=creation_date or datetime.now(),
        page_count=page_count,
    )


class DocumentParser(DocumentReader):
    """
    Unified PDF / DOCX reader.

    PDFs yield one DocumentPage per physical page. DOCX files have no real
    pagination, so their text becomes a single page and the page count is
    estimated from the text length.
    """

    def __init__(self, config: Optional[ReaderConfig] = None):
        self.config = config or get_config().reader
        if self.config.docx_chars_per_page <= 0:
            raise ValueError(f"docx_chars_per_page must be positive, got {self.config.docx_chars_per_page}")
        self.pdf_parser = PDFParser(prefer_pymupdf=self.config.prefer_pymupdf)

    def read(self, content: bytes, file_type: str) -> ReadDocument:
        if file_type == "pdf":
            return self._read_pdf(content)
        elif file_type == "docx":
            return self._read_docx(content)
        else:
            raise ValueError(f"Unsupported document type: {file_type}")

    def _read_pdf(self, content: bytes) -> ReadDocument:
        pdf_doc = self.pdf_parser.parse_bytes(content)

        pages = tuple(
            DocumentPage(page_number=page.page_number, text=page.text)
            for page in pdf_doc.pages
        )
        metadata = build_metadata(
            pdf_doc.metadata.get("title"),
            pdf_doc.metadata.get("author"),
            pdf_doc.metadata.get("creation_date"),
            pdf_doc.total_pages,
        )
        return ReadDocument(pages=pages, metadata=metadata)

    def _read_docx(self, content: bytes) -> ReadDocument:
        doc = Document(io.BytesIO(content))

        text_parts = [para.text for para in doc.paragraphs if para.text.strip()]
        for table in doc.tables:
            table_text = self._extract_table_text(table)
            if table_text:
                text_parts.append(table_text)

        text = "\n\n".join(text_parts)
        props = doc.core_properties
        metadata = build_metadata(
            props.title,
            props.author,
            props.created,
            self.estimate_page_count(text),
        )

        logger.debug(f"Read DOCX: {len(text_parts)} blocks, ~{metadata.page_count} pages")
        return ReadDocument(pages=(DocumentPage(page_number=1, text=text),), metadata=metadata)

    def estimate_page_count(self, text: str) -> int:
        """Rough page estimate for unpaginated formats (at least 1)."""
        return max(1, math.ceil(len(text) / self.config.docx_chars_per_page))

    def _extract_table_text(self, table) -> str:
        """Extract text from a DOCX table."""
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                rows.append("\t".join(cells))
        return "\n".join(rows)


def read_file(path: str) -> Tuple[bytes, str]:
    """
    Load a document from disk.

    Returns (content, file_type) with the type taken from the suffix,
    lowercased and without the dot. The tag is not validated here.
    """
    file_path = Path(path)
    return file_path.read_bytes(), file_path.suffix.lower().lstrip(".")
