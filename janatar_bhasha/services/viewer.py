"""Paged viewing of a single e-paper PDF."""

from enum import Enum
from typing import BinaryIO, Optional

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from janatar_bhasha.exceptions import InvalidInput


class ViewerStatus(str, Enum):
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


def count_pages(stream: BinaryIO) -> int:
    """Number of pages in a PDF; rejects anything PyPDF2 cannot read."""
    start = stream.tell()
    try:
        reader = PdfReader(stream, strict=False)
        pages = len(reader.pages)
    except (PdfReadError, OSError, ValueError, KeyError, TypeError) as e:
        raise InvalidInput(f'Only PDF files are allowed ({e})')
    finally:
        stream.seek(start)

    if pages < 1:
        raise InvalidInput('The PDF has no pages')
    return pages


class DocumentViewer:
    """Viewer state for one document URL.

    A viewer starts out loading and ends up either ready or failed. Both
    outcomes stick: showing another document takes a new viewer.
    """

    def __init__(self, pdf_url: str):
        self.pdf_url = pdf_url
        self.status = ViewerStatus.LOADING
        self.page_count = 0
        self.page_number = 1
        self.error: Optional[str] = None

    @classmethod
    def open(cls, epaper, page=1):
        viewer = cls(epaper.pdf_url)
        if epaper.page_count:
            viewer.loaded(epaper.page_count)
            viewer.go_to(page)
        else:
            viewer.failed('Page count unavailable')
        return viewer

    @property
    def is_ready(self):
        return self.status is ViewerStatus.READY

    def loaded(self, page_count: int):
        if self.status is not ViewerStatus.LOADING:
            return
        if page_count < 1:
            self.failed('Document has no pages')
            return
        self.page_count = page_count
        self.page_number = 1
        self.status = ViewerStatus.READY

    def failed(self, reason: str):
        if self.status is not ViewerStatus.LOADING:
            return
        self.error = reason
        self.status = ViewerStatus.FAILED

    def go_to(self, page) -> int:
        if not self.is_ready:
            return self.page_number
        try:
            page = int(page)
        except (TypeError, ValueError):
            page = 1
        self.page_number = max(1, min(page, self.page_count))
        return self.page_number

    @property
    def has_next(self):
        return self.is_ready and self.page_number < self.page_count

    @property
    def has_previous(self):
        return self.is_ready and self.page_number > 1

    def next_page(self) -> int:
        if self.has_next:
            self.page_number += 1
        return self.page_number

    def previous_page(self) -> int:
        if self.has_previous:
            self.page_number -= 1
        return self.page_number

    @property
    def page_url(self):
        """URL of the document opened at the current page."""
        if self.is_ready:
            return f'{self.pdf_url}#page={self.page_number}'
        return self.pdf_url
