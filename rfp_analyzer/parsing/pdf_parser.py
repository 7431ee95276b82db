"""
RFP Analyzer PDF Parser
Extracts per-page text and document info from PDF bytes
"""

import io
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

# Try PyMuPDF first (better text layout), fallback to pypdf
try:
    import fitz  # PyMuPDF
    PYMUPDF_AVAILABLE = True
except ImportError:
    PYMUPDF_AVAILABLE = False

import pypdf

logger = logging.getLogger(__name__)


_PDF_DATE_RE = re.compile(r"^(?:D:)?(\d{4})(\d{2})?(\d{2})?(\d{2})?(\d{2})?(\d{2})?")


def parse_pdf_date(value: Any) -> Optional[datetime]:
    """
    Convert a PDF info-dictionary date to a datetime.

    Accepts datetimes as-is and 'D:YYYYMMDDHHmmSS...' strings; the timezone
    suffix is ignored. Returns None when the value cannot be read.
    """
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None

    match = _PDF_DATE_RE.match(value.strip())
    if not match:
        return None

    year = int(match.group(1))
    month, day, hour, minute, second = (
        int(group) if group else default
        for group, default in zip(match.groups()[1:], (1, 1, 0, 0, 0))
    )
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


@dataclass
class PDFPage:
    """Text content of a single PDF page."""
    page_number: int
    text: str = ""


@dataclass
class PDFDocument:
    """Parsed PDF: page texts plus the info dictionary."""
    pages: List[PDFPage]
    total_pages: int
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def full_text(self) -> str:
        """Get full text of document."""
        return "\n\n".join(page.text for page in self.pages)


class PDFParser:
    """
    Extract page text from PDF bytes.

    metadata keys: title, author, creation_date (datetime or None).
    """

    def __init__(self, prefer_pymupdf: bool = True):
        self.use_pymupdf = prefer_pymupdf and PYMUPDF_AVAILABLE

    def parse_bytes(self, pdf_bytes: bytes) -> PDFDocument:
        """Parse PDF from bytes."""
        if self.use_pymupdf:
            document = self._parse_bytes_pymupdf(pdf_bytes)
        else:
            document = self._parse_bytes_pypdf(pdf_bytes)

        if document.total_pages < 1:
            raise ValueError("PDF document has no pages")

        logger.debug(
            f"Parsed PDF with {'PyMuPDF' if self.use_pymupdf else 'pypdf'}: "
            f"{document.total_pages} pages"
        )
        return document

    def _parse_bytes_pymupdf(self, pdf_bytes: bytes) -> PDFDocument:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        try:
            pages = [
                PDFPage(page_number=page_num + 1, text=page.get_text() or "")
                for page_num, page in enumerate(doc)
            ]
            info = doc.metadata or {}
            metadata = {
                "title": info.get("title", ""),
                "author": info.get("author", ""),
                "creation_date": parse_pdf_date(info.get("creationDate")),
            }
            return PDFDocument(pages=pages, total_pages=doc.page_count, metadata=metadata)
        finally:
            doc.close()

    def _parse_bytes_pypdf(self, pdf_bytes: bytes) -> PDFDocument:
        """Fallback parser for bytes using pypdf."""
        reader = pypdf.PdfReader(io.BytesIO(pdf_bytes))
        pages = [
            PDFPage(page_number=page_num + 1, text=page.extract_text() or "")
            for page_num, page in enumerate(reader.pages)
        ]

        info = reader.metadata
        metadata = {"title": "", "author": "", "creation_date": None}
        if info is not None:
            metadata["title"] = info.title or ""
            metadata["author"] = info.author or ""
            # pypdf raises on malformed dates; fall back to the raw string
            try:
                metadata["creation_date"] = info.creation_date
            except ValueError:
                metadata["creation_date"] = parse_pdf_date(info.get("/CreationDate"))

        return PDFDocument(pages=pages, total_pages=len(reader.pages), metadata=metadata)
