import io
import logging

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = frozenset({"application/pdf"})
DOCX_CONTENT_TYPES = frozenset({
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})


class UnsupportedDocumentError(ValueError):
    """Raised for uploads that are neither PDF nor DOCX."""


def document_kind(filename: str | None, content_type: str | None = None) -> str:
    """Classify an upload as "pdf" or "docx" from its name or content type."""
    name = (filename or "").lower()
    if name.endswith(".pdf") or content_type in PDF_CONTENT_TYPES:
        return "pdf"
    if name.endswith(".docx") or content_type in DOCX_CONTENT_TYPES:
        return "docx"
    raise UnsupportedDocumentError("Only PDF and DOCX resumes are accepted")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_document_text(content: bytes, filename: str | None, content_type: str | None = None) -> str:
    """Decode an uploaded resume to plain text."""
    kind = document_kind(filename, content_type)
    logger.debug("Decoding %s resume (%d bytes)", kind, len(content))
    if kind == "pdf":
        return extract_text(content)
    return extract_text_docx(content)
