# PDFNup/pdfnup/cli/app.py
"""
Command-line entry point.

    pdfnup [PDF] [--operation duplicate|combine] [--copies N]
           [--mode MODE] [--rotate] [--paper SIZE] [--preview] [-v]

Anything not given as an option is asked for interactively.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..logic.document_processor import DocumentProcessor
from ..logic.errors import PdfNupError
from ..logic.layout_calculator import ArrangementMode
from ..logic.layout_config import LayoutConfig
from ..logic.unit_converter import PAPER_SIZES
from .prompts import OPERATIONS, Prompter

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pdfnup",
        description="Duplicate PDF pages in place, or combine each page 2-up / 4-up on one sheet.",
    )
    parser.add_argument("pdf_path", nargs="?", help="The source PDF.")
    parser.add_argument(
        "--operation", choices=[key for key, _ in OPERATIONS], help="Operation to run."
    )
    parser.add_argument("--copies", type=int, help="Copies of each page (duplicate).")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ArrangementMode],
        help="Sheet arrangement (combine).",
    )
    parser.add_argument(
        "--rotate",
        action="store_true",
        default=None,
        help="Rotate each grid copy by 90 degrees (combine, grid only).",
    )
    parser.add_argument(
        "--paper",
        type=str.lower,
        choices=list(PAPER_SIZES),
        help="Output paper size (combine). Default: a4.",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Also render the first combined sheet to a PNG.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show progress and debug output."
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    # pypdf is chatty about harmless structural quirks
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def _log_progress(percent: int, message: str):
    logger.debug(f"[{percent:3d}%] {message}")


def run(args: argparse.Namespace, prompter: Prompter) -> int:
    """Run one operation. Raises PdfNupError on any failure."""
    pdf_path = args.pdf_path or prompter.ask_pdf_path()
    processor = DocumentProcessor(pdf_path)

    operation = args.operation or prompter.ask_operation()

    if operation == "duplicate":
        copies = args.copies if args.copies is not None else prompter.ask_copies()
        output_path = processor.duplicate_pages(copies, progress_callback=_log_progress)
        logger.info(f"Success! Output saved to: {output_path}")
        return 0

    mode = ArrangementMode(args.mode) if args.mode else prompter.ask_mode()
    rotate = False
    if mode is ArrangementMode.GRID:
        rotate = args.rotate if args.rotate is not None else prompter.ask_rotate()
    elif args.rotate:
        logger.warning("--rotate only applies to the grid arrangement, ignoring it")

    paper = args.paper if args.paper else prompter.ask_paper()
    config = LayoutConfig.from_choices(mode, paper, rotate)

    output_path, preview_path = processor.combine_pages(
        config, preview=args.preview, progress_callback=_log_progress
    )
    logger.info(f"Success! 2-up PDF saved to: {output_path}")
    if preview_path:
        logger.info(f"Preview saved to: {preview_path}")
    return 0


def main(argv: Optional[List[str]] = None, prompter: Optional[Prompter] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args, prompter or Prompter())
    except PdfNupError as e:
        logger.error(f"An error occurred: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.error("Cancelled.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
