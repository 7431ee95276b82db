"""
RFP Analyzer Test Configuration
===============================

Fixtures:
- SAMPLE_PAGES: two-page RFP text with headers, questions and requirements
- FakeReader / FailingReader: in-memory DocumentReader doubles
- make_docx: builds DOCX bytes with python-docx
"""

import io
import os
import sys
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rfp_analyzer.analysis.models import DocumentMetadata, DocumentPage, ReadDocument
from rfp_analyzer.core.config import set_config
from rfp_analyzer.parsing.document_parser import DocumentReader


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (real PDF/DOCX libraries)")


# =============================================================================
# Sample RFP Content
# =============================================================================

SAMPLE_PAGE_1 = "INTRODUCTION\nThis project covers media buying.\nBUDGET:\nSee attached sheet."

SAMPLE_PAGE_2 = (
    "Scope of work:\n"
    "Vendors must provide 24/7 support.\n"
    "\n"
    "Can vendors provide weekend coverage?\n"
    "\n"
    "The proposal should list all requirements."
)

SAMPLE_PAGES = [SAMPLE_PAGE_1, SAMPLE_PAGE_2]

FIXED_CREATED = datetime(2025, 1, 15, 9, 30, 0)


def make_document(pages: Sequence[str], title: str = "Media Buying RFP") -> ReadDocument:
    return ReadDocument(
        pages=tuple(DocumentPage(page_number=i, text=text) for i, text in enumerate(pages, 1)),
        metadata=DocumentMetadata(
            title=title,
            author="Procurement Office",
            creation_date=FIXED_CREATED,
            page_count=max(1, len(pages)),
        ),
    )


class FakeReader(DocumentReader):
    """Returns a fixed document and records every call"""

    def __init__(self, document: ReadDocument):
        self.document = document
        self.calls: List[Tuple[bytes, str]] = []

    def read(self, content: bytes, file_type: str) -> ReadDocument:
        self.calls.append((content, file_type))
        return self.document


class FailingReader(DocumentReader):
    """Raises the given exception on every read"""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    def read(self, content: bytes, file_type: str) -> ReadDocument:
        self.calls += 1
        raise self.error


@pytest.fixture
def sample_document() -> ReadDocument:
    return make_document(SAMPLE_PAGES)


@pytest.fixture
def sample_reader(sample_document) -> FakeReader:
    return FakeReader(sample_document)


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from a clean environment-derived configuration"""
    for name in list(os.environ):
        if name.startswith("RFP_ANALYZER_"):
            monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


def make_docx(
    paragraphs: Sequence[str],
    title: str = "",
    author: str = "",
    created: Optional[datetime] = None,
    table_rows: Optional[Sequence[Sequence[str]]] = None,
) -> bytes:
    """Build a DOCX file in memory"""
    from docx import Document

    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)

    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for row_idx, row in enumerate(table_rows):
            for col_idx, value in enumerate(row):
                table.cell(row_idx, col_idx).text = value

    doc.core_properties.title = title
    doc.core_properties.author = author
    if created is not None:
        doc.core_properties.created = created

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
