# PDFNup/pdfnup/logic/unit_converter.py
from typing import Dict, NamedTuple

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4


class PageSize(NamedTuple):
    """Page or sheet dimensions in points (1/72 inch)."""

    width: float
    height: float


# Output paper sizes, always portrait, in points
PAPER_SIZES: Dict[str, PageSize] = {
    "a4": PageSize(595.28, 841.89),
    "letter": PageSize(612.0, 792.0),
    "legal": PageSize(612.0, 1008.0),
    "a3": PageSize(841.89, 1190.55),
    "tabloid": PageSize(792.0, 1224.0),
}

PAPER_LABELS: Dict[str, str] = {
    "a4": "A4 (210 × 297 mm)",
    "letter": "Letter (8.5 × 11 in)",
    "legal": "Legal (8.5 × 14 in)",
    "a3": "A3 (297 × 420 mm)",
    "tabloid": "Tabloid (11 × 17 in)",
}

DEFAULT_PAPER = "a4"


def mm_to_points(mm_value: float) -> float:
    """Converts a value from millimeters to points."""
    return mm_value / MM_PER_INCH * POINTS_PER_INCH


def points_to_mm(points_value: float) -> float:
    """Converts a value from points to millimeters."""
    return points_value * MM_PER_INCH / POINTS_PER_INCH
