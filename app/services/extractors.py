"""
Text extraction strategies, keyed by lowercase file extension.

Each strategy takes the raw file bytes and returns plain text. Parser
errors propagate; `ResumeService.extract_text` wraps them.
"""

from io import BytesIO
from typing import Callable, Dict, List

from PyPDF2 import PdfReader
from docx import Document

Extractor = Callable[[bytes], str]

EXTRACTORS: Dict[str, Extractor] = {}


def register_extractor(*extensions: str) -> Callable[[Extractor], Extractor]:
    """Register a strategy for one or more extensions (".pdf", ...)."""
    def decorator(fn: Extractor) -> Extractor:
        for ext in extensions:
            EXTRACTORS[ext.lower()] = fn
        return fn
    return decorator


def get_extractor(extension: str) -> Extractor:
    """Look up the strategy for an extension. Raises KeyError if none is registered."""
    return EXTRACTORS[extension.lower()]


def _page_text_items(page) -> List[str]:
    items: List[str] = []

    def visitor(text, cm, tm, font_dict, font_size):
        # PyPDF2 appends layout line breaks to chunks; only the text around them is an item
        for piece in (text or "").splitlines():
            piece = piece.strip()
            if piece:
                items.append(piece)

    page.extract_text(visitor_text=visitor)
    return items


@register_extractor(".pdf")
def extract_pdf(file_content: bytes) -> str:
    """Text items of each page joined by single spaces, one line per page, pages in order."""
    reader = PdfReader(BytesIO(file_content))
    text = ""
    for page in reader.pages:
        text += " ".join(_page_text_items(page)) + "\n"
    return text


@register_extractor(".doc", ".docx")
def extract_docx(file_content: bytes) -> str:
    doc = Document(BytesIO(file_content))

    text_parts = [paragraph.text for paragraph in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text for cell in row.cells if cell.text.strip()]
            if cells:
                text_parts.append(" ".join(cells))

    return "\n".join(text_parts)


@register_extractor(".txt")
def extract_txt(file_content: bytes) -> str:
    return file_content.decode("utf-8")
