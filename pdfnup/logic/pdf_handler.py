# PDFNup/pdfnup/logic/pdf_handler.py
import logging
import os

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .errors import InvalidDocument, InvalidPath
from .unit_converter import PageSize

logger = logging.getLogger(__name__)


def validate_pdf_path(file_path) -> str:
    """Checks that the path names an existing file with a .pdf extension."""
    file_path = os.fspath(file_path)
    if os.path.splitext(file_path)[1].lower() != ".pdf":
        raise InvalidPath(f"Not a PDF file: {file_path}")
    if not os.path.isfile(file_path):
        raise InvalidPath(f"File does not exist: {file_path}")
    return file_path


class PDFHandler:
    """Handles all operations related to reading the source PDF."""

    def __init__(self):
        self.reader = None
        self.file_path = None

    def open_pdf(self, file_path):
        """Opens and loads a PDF file."""
        file_path = validate_pdf_path(file_path)
        try:
            reader = PdfReader(file_path)
            if reader.is_encrypted and not reader.decrypt(""):
                raise InvalidDocument(f"PDF is password protected: {file_path}")
            page_count = len(reader.pages)
        except PdfReadError as e:
            raise InvalidDocument(f"Could not read {file_path}: {e}") from e

        if page_count == 0:
            raise InvalidDocument(f"PDF has no pages: {file_path}")

        self.reader = reader
        self.file_path = file_path
        logger.debug(f"Opened {file_path} ({page_count} pages)")
        return reader

    def get_page_count(self):
        """Returns the number of pages in the opened PDF."""
        if self.reader:
            return len(self.reader.pages)
        return 0

    def get_page_size(self, page_index: int) -> PageSize:
        """Returns the media box size of one page, in points."""
        return page_size(self.reader.pages[page_index], page_index)


def page_size(page, page_index: int = 0) -> PageSize:
    """
    Media box size of a pypdf page.

    Raises:
        InvalidDocument: the page has zero or negative width/height
    """
    box = page.mediabox
    width, height = float(box.width), float(box.height)
    if width <= 0 or height <= 0:
        raise InvalidDocument(
            f"Page {page_index + 1} has no area ({width} x {height})"
        )
    return PageSize(width, height)
