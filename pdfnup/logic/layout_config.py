# PDFNup/pdfnup/logic/layout_config.py
"""
Explicit settings for the combine operation.

Replaces the implicit "A4 unless asked" default with a value that is passed
into the layout calculator and the saver.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import InvalidConfiguration
from .layout_calculator import ArrangementMode
from .unit_converter import DEFAULT_PAPER, PAPER_SIZES, PageSize


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for one combine run.

    Attributes:
        mode: Sheet arrangement (default side-by-side)
        paper: Output sheet size in points, portrait (default A4)
        rotate: Turn each grid copy 90°; ignored by the other modes
    """

    mode: ArrangementMode = ArrangementMode.SIDE_BY_SIDE
    paper: PageSize = field(default_factory=lambda: PAPER_SIZES[DEFAULT_PAPER])
    rotate: bool = False

    def __post_init__(self):
        if self.paper.width <= 0 or self.paper.height <= 0:
            raise InvalidConfiguration(
                f"Sheet size must be positive, got {self.paper.width} x {self.paper.height}"
            )

    @property
    def slots_per_sheet(self) -> int:
        return 4 if self.mode is ArrangementMode.GRID else 2

    @classmethod
    def from_choices(
        cls,
        mode: Union[str, ArrangementMode],
        paper_key: Optional[str] = None,
        rotate: bool = False,
    ) -> "LayoutConfig":
        """
        Build a config from CLI or prompt values.

        Args:
            mode: Arrangement name, e.g. "grid", or an ArrangementMode
            paper_key: Key into PAPER_SIZES ("a4", "letter", ...); None means A4
            rotate: Grid rotation flag

        Raises:
            InvalidConfiguration: unknown mode or paper size
        """
        try:
            arrangement = ArrangementMode(mode)
        except ValueError as e:
            raise InvalidConfiguration(f"Unknown arrangement: {mode!r}") from e

        key = (paper_key or DEFAULT_PAPER).lower()
        if key not in PAPER_SIZES:
            raise InvalidConfiguration(
                f"Unknown paper size: {paper_key!r} (choose from {', '.join(PAPER_SIZES)})"
            )

        return cls(mode=arrangement, paper=PAPER_SIZES[key], rotate=bool(rotate))
