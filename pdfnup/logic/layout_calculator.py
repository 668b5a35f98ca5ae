# PDFNup/pdfnup/logic/layout_calculator.py
"""
Pure layout geometry for combining pages onto one sheet.
No file I/O, no rendering, no PDF operations.
Just slot partitioning and the scale/offset/rotation for each copy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Tuple

from .errors import InvalidConfiguration, InvalidDocument

if TYPE_CHECKING:
    from .layout_config import LayoutConfig


class ArrangementMode(Enum):
    """The fixed set of sheet arrangements."""

    SIDE_BY_SIDE = "side-by-side"
    STACKED = "stacked"
    ROTATED_TOP_BOTTOM = "rotated-top-bottom"
    GRID = "grid"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


_MODE_LABELS = {
    ArrangementMode.SIDE_BY_SIDE: "Side-by-side (left/right)",
    ArrangementMode.STACKED: "Stacked (top/bottom, no rotation)",
    ArrangementMode.ROTATED_TOP_BOTTOM: "Rotated (top/bottom, rotated 90°)",
    ArrangementMode.GRID: "Grid (2x2)",
}


@dataclass(frozen=True)
class Slot:
    """Sheet-relative rectangle, origin at bottom-left, y increasing upward."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PlacementRecord:
    """
    How one copy of the source page is drawn onto the sheet.

    The page is scaled by ``scale``, rotated counter-clockwise by
    ``rotation`` degrees about its own origin, then translated to
    (``offset_x``, ``offset_y``).
    """

    scale: float
    offset_x: float
    offset_y: float
    rotation: int
    slot: Slot


def _halves_left_right(width: float, height: float) -> List[Slot]:
    half = width / 2
    return [Slot(0.0, 0.0, half, height), Slot(half, 0.0, half, height)]


def _halves_top_bottom(width: float, height: float) -> List[Slot]:
    half = height / 2
    return [Slot(0.0, half, width, half), Slot(0.0, 0.0, width, half)]


def _quarters(width: float, height: float) -> List[Slot]:
    half_w = width / 2
    half_h = height / 2
    return [
        Slot(0.0, half_h, half_w, half_h),  # top-left
        Slot(half_w, half_h, half_w, half_h),  # top-right
        Slot(0.0, 0.0, half_w, half_h),  # bottom-left
        Slot(half_w, 0.0, half_w, half_h),  # bottom-right
    ]


# mode -> (slot partitioning, rotation given the rotate flag)
_MODE_TABLE: Dict[
    ArrangementMode,
    Tuple[Callable[[float, float], List[Slot]], Callable[[bool], int]],
] = {
    ArrangementMode.SIDE_BY_SIDE: (_halves_left_right, lambda rotate: 0),
    ArrangementMode.STACKED: (_halves_top_bottom, lambda rotate: 0),
    ArrangementMode.ROTATED_TOP_BOTTOM: (_halves_top_bottom, lambda rotate: 90),
    ArrangementMode.GRID: (_quarters, lambda rotate: 90 if rotate else 0),
}

_missing = set(ArrangementMode) - set(_MODE_TABLE)
if _missing:
    raise RuntimeError(f"No layout defined for: {sorted(m.value for m in _missing)}")


def place_in_slot(
    slot: Slot, source_width: float, source_height: float, rotation: int
) -> PlacementRecord:
    """
    Contain-fit one source page into a slot and center it.

    For a 90° turn the footprint becomes (height × width). Rotating about the
    page origin swings the content to the left of the anchor, so the x
    offset is advanced by the rotated width to keep it inside the slot.
    """
    if rotation == 90:
        scale = min(slot.width / source_height, slot.height / source_width)
        footprint_w = source_height * scale
        footprint_h = source_width * scale
        offset_x = slot.x + (slot.width - footprint_w) / 2 + footprint_w
    else:
        scale = min(slot.width / source_width, slot.height / source_height)
        footprint_w = source_width * scale
        footprint_h = source_height * scale
        offset_x = slot.x + (slot.width - footprint_w) / 2

    offset_y = slot.y + (slot.height - footprint_h) / 2
    return PlacementRecord(scale, offset_x, offset_y, rotation, slot)


def compute_slots(
    mode: ArrangementMode,
    sheet_width: float,
    sheet_height: float,
    source_width: float,
    source_height: float,
    rotate: bool = False,
) -> List[PlacementRecord]:
    """
    Compute the placement of every source copy on one output sheet.

    Args:
        mode: Sheet arrangement
        sheet_width: Output sheet width in points
        sheet_height: Output sheet height in points
        source_width: Source page width in points
        source_height: Source page height in points
        rotate: Turn grid copies 90° (ignored by the other modes)

    Returns:
        Two placement records (four for grid), in drawing order:
        left/right, top/bottom, or TL, TR, BL, BR

    Raises:
        InvalidConfiguration: unknown mode, or sheet size is not positive
        InvalidDocument: source page size is not positive
    """
    if sheet_width <= 0 or sheet_height <= 0:
        raise InvalidConfiguration(
            f"Sheet size must be positive, got {sheet_width} x {sheet_height}"
        )
    if source_width <= 0 or source_height <= 0:
        raise InvalidDocument(
            f"Source page has no area: {source_width} x {source_height}"
        )

    try:
        arrangement = ArrangementMode(mode)
    except ValueError as e:
        raise InvalidConfiguration(f"Unknown arrangement: {mode!r}") from e

    partition, rotation_for = _MODE_TABLE[arrangement]
    rotation = rotation_for(rotate)

    return [
        place_in_slot(slot, source_width, source_height, rotation)
        for slot in partition(sheet_width, sheet_height)
    ]


def layout_for(
    config: "LayoutConfig", source_width: float, source_height: float
) -> List[PlacementRecord]:
    """Same as compute_slots, with the sheet settings taken from a LayoutConfig."""
    return compute_slots(
        config.mode,
        config.paper.width,
        config.paper.height,
        source_width,
        source_height,
        config.rotate,
    )
