# PDFNup/pdfnup/logic/pdf_renderer.py
"""
Preview rendering using PyMuPDF (fitz).
Handles ONLY raster previews of assembled documents - no saving, no layout logic.
"""

import logging

import fitz

from .errors import InvalidDocument

logger = logging.getLogger(__name__)


class PDFRenderer:
    """Stateless helpers around PyMuPDF."""

    @staticmethod
    def render_preview(pdf_bytes: bytes, page_index: int = 0, dpi: int = 72) -> bytes:
        """
        Rasterise one page of an assembled document to PNG data.

        Args:
            pdf_bytes: Complete PDF document in memory
            page_index: Page to render (0-based)
            dpi: Resolution for rendering

        Returns:
            The PNG image, not yet written anywhere
        """
        zoom = dpi / 72.0
        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as e:
            raise InvalidDocument(f"Could not open assembled PDF: {e}") from e

        with doc:
            if not 0 <= page_index < doc.page_count:
                raise InvalidDocument(
                    f"Preview page {page_index + 1} out of range (1-{doc.page_count})"
                )
            pixmap = doc.load_page(page_index).get_pixmap(
                matrix=fitz.Matrix(zoom, zoom), alpha=False
            )
            png_bytes = pixmap.tobytes("png")

        logger.debug(f"Rendered preview of page {page_index + 1} at {dpi} dpi")
        return png_bytes
