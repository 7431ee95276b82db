# RFP Analyzer Parsing Layer
# Document readers feeding the analysis core

from .pdf_parser import PDFParser, PDFDocument, PDFPage, parse_pdf_date
from .document_parser import DocumentReader, DocumentParser, build_metadata, read_file

__all__ = [
    "PDFParser",
    "PDFDocument",
    "PDFPage",
    "parse_pdf_date",
    "DocumentReader",
    "DocumentParser",
    "build_metadata",
    "read_file",
]
