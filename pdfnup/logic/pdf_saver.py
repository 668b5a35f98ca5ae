# PDFNup/pdfnup/logic/pdf_saver.py
"""
PDF assembly using pypdf for vector-preserving output.
Builds the duplicated and combined documents entirely in memory;
the caller decides where (and whether) the bytes are written.
"""

import io
import logging
from typing import Callable, Optional, Tuple

from pypdf import PageObject, PdfReader, PdfWriter, Transformation

from .layout_calculator import PlacementRecord, layout_for
from .layout_config import LayoutConfig
from .page_duplicator import duplicate
from .pdf_handler import page_size

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]

_EXACT_CTM_VALUES = (0.0, 1.0, -1.0)
_CTM_TOLERANCE = 1e-10


class PDFSaver:
    """
    Handles PDF output generation using pypdf.
    Source content is merged as vectors, never rasterised.
    """

    @staticmethod
    def save_duplicated(
        reader: PdfReader,
        copies: int,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> bytes:
        """
        Build a document where every page is repeated ``copies`` times in place.

        Args:
            reader: Opened source document
            copies: Copies of each page (>= 1)
            progress_callback: Optional function(percent: int, message: str)

        Returns:
            The complete output PDF
        """
        order = duplicate(len(reader.pages), copies)
        writer = PdfWriter()

        if progress_callback:
            progress_callback(5, "Preparing output document...")

        total = len(order)
        for i, source_idx in enumerate(order):
            # pypdf gives each added page its own page dictionary
            writer.add_page(reader.pages[source_idx])

            if progress_callback:
                percent = int(5 + ((i + 1) / total) * 90)
                progress_callback(percent, f"Copying page {i + 1} of {total}...")

        PDFSaver._copy_metadata(reader, writer)
        return PDFSaver._to_bytes(writer, progress_callback)

    @staticmethod
    def save_nup(
        reader: PdfReader,
        config: LayoutConfig,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> bytes:
        """
        Build a document with one sheet per source page, holding 2 or 4 copies.

        Args:
            reader: Opened source document
            config: Arrangement, paper size and grid rotation
            progress_callback: Optional function(percent: int, message: str)

        Returns:
            The complete output PDF
        """
        writer = PdfWriter()
        sheet_width, sheet_height = config.paper

        if progress_callback:
            progress_callback(5, "Preparing output document...")

        total = len(reader.pages)
        for i, source_page in enumerate(reader.pages):
            width, height = page_size(source_page, i)
            placements = layout_for(config, width, height)

            sheet = writer.add_blank_page(width=sheet_width, height=sheet_height)
            for record in placements:
                PDFSaver._merge_page_with_placement(sheet, source_page, record)

            if progress_callback:
                percent = int(5 + ((i + 1) / total) * 90)
                progress_callback(percent, f"Assembling sheet {i + 1} of {total}...")

        logger.debug(
            f"{config.mode.value}: {total} sheet(s) of "
            f"{sheet_width} x {sheet_height} pt, {config.slots_per_sheet} copies each"
        )
        PDFSaver._copy_metadata(reader, writer)
        return PDFSaver._to_bytes(writer, progress_callback)

    @staticmethod
    def placement_transform(
        record: PlacementRecord, source_left: float = 0.0, source_bottom: float = 0.0
    ) -> Tuple[float, float, float, float, float, float]:
        """
        Convert a placement record into a PDF transformation matrix.

        The source media box origin is moved to (0, 0) first, then the page
        is scaled, rotated about that origin, and translated to the offsets.
        """
        transformation = (
            Transformation()
            .translate(tx=-source_left, ty=-source_bottom)
            .scale(sx=record.scale, sy=record.scale)
        )
        if record.rotation:
            transformation = transformation.rotate(record.rotation)
        transformation = transformation.translate(tx=record.offset_x, ty=record.offset_y)

        return PDFSaver._clean_ctm(transformation.ctm)

    @staticmethod
    def _merge_page_with_placement(
        sheet: PageObject, source_page: PageObject, record: PlacementRecord
    ):
        """Merge one copy of the source page onto the sheet at its placement."""
        box = source_page.mediabox
        ctm = PDFSaver.placement_transform(record, float(box.left), float(box.bottom))
        sheet.merge_transformed_page(source_page, ctm, over=True, expand=False)

    @staticmethod
    def _clean_ctm(ctm) -> Tuple[float, float, float, float, float, float]:
        # cos/sin of 90° leave ~1e-17 residue; snap it so matrices print as 0 and ±1
        return tuple(
            next((exact for exact in _EXACT_CTM_VALUES if abs(value - exact) < _CTM_TOLERANCE), value)
            for value in ctm
        )

    @staticmethod
    def _copy_metadata(reader: PdfReader, writer: PdfWriter):
        meta = reader.metadata
        if meta:
            # indexing resolves indirect values
            writer.add_metadata({key: str(meta[key]) for key in meta})

    @staticmethod
    def _to_bytes(
        writer: PdfWriter, progress_callback: Optional[ProgressCallback] = None
    ) -> bytes:
        if progress_callback:
            progress_callback(95, "Serialising PDF...")

        buffer = io.BytesIO()
        writer.write(buffer)

        if progress_callback:
            progress_callback(100, "Assembly complete!")
        return buffer.getvalue()
