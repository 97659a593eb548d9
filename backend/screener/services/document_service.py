"""
Document Service — turn uploaded resume files into plain text.

Supports PDF (pdfplumber), DOCX (python-docx) and plain text. The result is
normalized but otherwise untouched; fact extraction happens elsewhere.
"""

from __future__ import annotations

import logging
from io import BytesIO

import docx
import pdfplumber

from screener.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx", "doc", "txt")

# silence noisy PDF logging
logging.getLogger("pdfminer").setLevel(logging.ERROR)


class UnsupportedDocumentError(ValueError):
    """The file extension is not one we can decode."""


def file_extension(file_name: str) -> str:
    return file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""


def extract_text(file_bytes: bytes, file_name: str) -> str:
    """Decode a resume file into normalized plain text."""
    ext = file_extension(file_name)
    if ext == "pdf":
        raw_text = _extract_pdf_text(file_bytes)
    elif ext in ("docx", "doc"):
        raw_text = _extract_docx_text(file_bytes)
    elif ext == "txt":
        raw_text = file_bytes.decode("utf-8", errors="replace")
    else:
        raise UnsupportedDocumentError(
            f"Unsupported file type: .{ext}. Please upload PDF, DOCX or TXT."
        )

    text = normalize_text(raw_text)
    logger.info(f"Decoded '{file_name}': {len(file_bytes)} bytes -> {len(text)} chars")
    return text


def _extract_pdf_text(file_bytes: bytes) -> str:
    """Extract text from a PDF file using pdfplumber."""
    text_parts: list[str] = []
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n\n".join(text_parts)


def _extract_docx_text(file_bytes: bytes) -> str:
    """Extract text from a DOCX file using python-docx."""
    document = docx.Document(BytesIO(file_bytes))
    text_parts = [para.text.strip() for para in document.paragraphs]

    # Some resumes use tables for layout
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                cell_text = cell.text.strip()
                if cell_text:
                    text_parts.append(cell_text)

    return "\n".join(text_parts)
