# PDFNup/pdfnup/logic/document_processor.py
"""
Coordinator for the duplicate and combine operations.
Delegates reading to PDFHandler, assembly to PDFSaver, and naming to output_paths.
Output is only written once the whole document has been assembled.
"""

import contextlib
import logging
from pathlib import Path
from typing import Optional, Tuple

from .errors import OutputError
from .layout_config import LayoutConfig
from .output_paths import (
    COMBINED_SUFFIX,
    DUPLICATED_SUFFIX,
    output_path_for,
    unique_file_path,
)
from .pdf_handler import PDFHandler
from .pdf_renderer import PDFRenderer
from .pdf_saver import PDFSaver, ProgressCallback
from .unit_converter import points_to_mm

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """
    Thin coordinator that holds the source PDF and runs one operation on it.

    Responsibilities:
    - Validate and open the source PDF
    - Run the duplicate or combine assembly
    - Pick a free output name next to the source and write the result
    """

    def __init__(self, file_path: str):
        """
        Initialize the processor with a PDF file.

        Args:
            file_path: Path to the source PDF

        Raises:
            InvalidPath: missing file or not a .pdf
            InvalidDocument: unreadable document or no pages
        """
        self.handler = PDFHandler()
        self.reader = self.handler.open_pdf(file_path)
        self.pdf_path = Path(self.handler.file_path)
        self.original_page_count = self.handler.get_page_count()

        width, height = self.handler.get_page_size(0)
        logger.info(
            f"Loaded {self.pdf_path.name}: {self.original_page_count} page(s), "
            f"first page {points_to_mm(width):.1f} x {points_to_mm(height):.1f} mm"
        )

    def duplicate_pages(
        self, copies: int, progress_callback: Optional[ProgressCallback] = None
    ) -> Path:
        """
        Write ``<name>_duplicated.pdf`` with every page repeated ``copies`` times.

        Returns:
            Path of the written file
        """
        pdf_bytes = PDFSaver.save_duplicated(self.reader, copies, progress_callback)
        output_path = unique_file_path(output_path_for(self.pdf_path, DUPLICATED_SUFFIX))
        self._write(output_path, pdf_bytes)
        return output_path

    def combine_pages(
        self,
        config: LayoutConfig,
        preview: bool = False,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Tuple[Path, Optional[Path]]:
        """
        Write ``<name>_2up.pdf`` with each page placed 2 or 4 times per sheet.

        Args:
            config: Arrangement, paper size and grid rotation
            preview: Also render the first sheet to a PNG beside the output

        Returns:
            (output PDF path, preview PNG path or None)
        """
        pdf_bytes = PDFSaver.save_nup(self.reader, config, progress_callback)
        png_bytes = PDFRenderer.render_preview(pdf_bytes) if preview else None

        output_path = unique_file_path(output_path_for(self.pdf_path, COMBINED_SUFFIX))
        self._write(output_path, pdf_bytes)

        preview_path = None
        if png_bytes is not None:
            preview_path = unique_file_path(output_path.with_suffix(".png"))
            try:
                self._write(preview_path, png_bytes)
            except OutputError:
                self._discard(output_path)
                raise
        return output_path, preview_path

    @staticmethod
    def _write(path: Path, data: bytes):
        try:
            path.write_bytes(data)
        except OSError as e:
            DocumentProcessor._discard(path)
            raise OutputError(f"Could not write {path}: {e}") from e
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    @staticmethod
    def _discard(path: Path):
        # the write error is what gets reported
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
