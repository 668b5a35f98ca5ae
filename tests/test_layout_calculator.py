"""
Tests for the sheet layout geometry.

Footprints are computed in sheet coordinates. A copy rotated 90° about its
origin and anchored at (offset_x, offset_y) covers
[offset_x - h*s, offset_x] x [offset_y, offset_y + w*s].
"""

import itertools

import pytest

from pdfnup.logic.errors import InvalidConfiguration, InvalidDocument
from pdfnup.logic.layout_calculator import (
    ArrangementMode,
    Slot,
    compute_slots,
    layout_for,
    place_in_slot,
)
from pdfnup.logic.layout_config import LayoutConfig
from pdfnup.logic.unit_converter import PAPER_SIZES

EPS = 1e-6
A4_W, A4_H = PAPER_SIZES["a4"]

SOURCE_SIZES = [(612, 792), (595.28, 841.89), (842, 595), (200, 1000), (1000, 100)]
MODE_CASES = [
    (ArrangementMode.SIDE_BY_SIDE, False),
    (ArrangementMode.STACKED, False),
    (ArrangementMode.ROTATED_TOP_BOTTOM, False),
    (ArrangementMode.GRID, False),
    (ArrangementMode.GRID, True),
]


def footprint(record, width, height):
    """(x0, y0, x1, y1) covered by the scaled (and possibly rotated) copy."""
    s = record.scale
    if record.rotation == 90:
        return (record.offset_x - height * s, record.offset_y, record.offset_x, record.offset_y + width * s)
    return (record.offset_x, record.offset_y, record.offset_x + width * s, record.offset_y + height * s)


class TestSlotPartitioning:

    @pytest.mark.parametrize("mode,rotate", MODE_CASES)
    def test_slot_count_per_mode(self, mode, rotate):
        records = compute_slots(mode, A4_W, A4_H, 612, 792, rotate)
        assert len(records) == (4 if mode is ArrangementMode.GRID else 2)

    def test_side_by_side_slots_are_left_then_right(self):
        records = compute_slots(ArrangementMode.SIDE_BY_SIDE, 600, 800, 612, 792)

        assert records[0].slot == Slot(0, 0, 300, 800)
        assert records[1].slot == Slot(300, 0, 300, 800)

    @pytest.mark.parametrize("mode", [ArrangementMode.STACKED, ArrangementMode.ROTATED_TOP_BOTTOM])
    def test_top_bottom_slots_are_top_then_bottom(self, mode):
        records = compute_slots(mode, 600, 800, 612, 792)

        assert records[0].slot == Slot(0, 400, 600, 400)
        assert records[1].slot == Slot(0, 0, 600, 400)

    def test_grid_slots_are_tl_tr_bl_br(self):
        records = compute_slots(ArrangementMode.GRID, 600, 800, 612, 792)

        assert [r.slot for r in records] == [
            Slot(0, 400, 300, 400),
            Slot(300, 400, 300, 400),
            Slot(0, 0, 300, 400),
            Slot(300, 0, 300, 400),
        ]

    @pytest.mark.parametrize("rotate", [False, True])
    def test_grid_slots_tile_the_sheet(self, rotate):
        """Four slots cover the sheet exactly: total area matches and no two overlap."""
        slots = [r.slot for r in compute_slots(ArrangementMode.GRID, A4_W, A4_H, 612, 792, rotate)]

        assert sum(s.width * s.height for s in slots) == pytest.approx(A4_W * A4_H)
        for a, b in itertools.combinations(slots, 2):
            overlap_w = min(a.x + a.width, b.x + b.width) - max(a.x, b.x)
            overlap_h = min(a.y + a.height, b.y + b.height) - max(a.y, b.y)
            assert overlap_w <= EPS or overlap_h <= EPS
        assert min(s.x for s in slots) == 0 and min(s.y for s in slots) == 0
        assert max(s.x + s.width for s in slots) == pytest.approx(A4_W)
        assert max(s.y + s.height for s in slots) == pytest.approx(A4_H)

    def test_every_mode_has_a_layout(self):
        for mode in ArrangementMode:
            assert compute_slots(mode, A4_W, A4_H, 612, 792)

    def test_mode_given_by_value_string(self):
        records = compute_slots("stacked", A4_W, A4_H, 612, 792)
        assert records == compute_slots(ArrangementMode.STACKED, A4_W, A4_H, 612, 792)


class TestRotation:

    @pytest.mark.parametrize("mode,rotate,expected", [
        (ArrangementMode.SIDE_BY_SIDE, True, 0),
        (ArrangementMode.STACKED, True, 0),
        (ArrangementMode.ROTATED_TOP_BOTTOM, False, 90),
        (ArrangementMode.GRID, False, 0),
        (ArrangementMode.GRID, True, 90),
    ])
    def test_rotation_per_mode(self, mode, rotate, expected):
        records = compute_slots(mode, A4_W, A4_H, 612, 792, rotate)
        assert {r.rotation for r in records} == {expected}

    def test_rotated_scale_uses_swapped_source(self):
        record = place_in_slot(Slot(0, 0, 600, 400), 612, 792, 90)
        assert record.scale == pytest.approx(min(600 / 792, 400 / 612))

    def test_rotated_offset_advances_by_rotated_width(self):
        slot = Slot(10, 20, 600, 400)
        record = place_in_slot(slot, 612, 792, 90)
        s = record.scale

        assert record.offset_x == pytest.approx(10 + (600 - 792 * s) / 2 + 792 * s)
        assert record.offset_y == pytest.approx(20 + (400 - 612 * s) / 2)


class TestContainAndCenter:

    @pytest.mark.parametrize("mode,rotate", MODE_CASES)
    @pytest.mark.parametrize("source", SOURCE_SIZES)
    def test_copy_fits_inside_its_slot(self, mode, rotate, source):
        width, height = source
        for record in compute_slots(mode, A4_W, A4_H, width, height, rotate):
            x0, y0, x1, y1 = footprint(record, width, height)
            slot = record.slot
            assert x0 >= slot.x - EPS
            assert y0 >= slot.y - EPS
            assert x1 <= slot.x + slot.width + EPS
            assert y1 <= slot.y + slot.height + EPS

    @pytest.mark.parametrize("mode,rotate", MODE_CASES)
    @pytest.mark.parametrize("source", SOURCE_SIZES)
    def test_copy_is_centered_in_its_slot(self, mode, rotate, source):
        width, height = source
        for record in compute_slots(mode, A4_W, A4_H, width, height, rotate):
            x0, y0, x1, y1 = footprint(record, width, height)
            slot = record.slot
            assert (x0 + x1) / 2 == pytest.approx(slot.x + slot.width / 2)
            assert (y0 + y1) / 2 == pytest.approx(slot.y + slot.height / 2)

    @pytest.mark.parametrize("mode,rotate", MODE_CASES)
    def test_copy_touches_slot_on_limiting_axis(self, mode, rotate):
        """Contain fit: the copy fills the slot along one axis."""
        for record in compute_slots(mode, A4_W, A4_H, 612, 792, rotate):
            x0, y0, x1, y1 = footprint(record, 612, 792)
            slot = record.slot
            assert (
                x1 - x0 == pytest.approx(slot.width)
                or y1 - y0 == pytest.approx(slot.height)
            )

    def test_letter_on_a4_side_by_side(self):
        records = compute_slots(ArrangementMode.SIDE_BY_SIDE, A4_W, A4_H, 612, 792)
        expected_scale = min(297.64 / 612, 841.89 / 792)

        assert expected_scale == pytest.approx(0.48634, abs=1e-5)
        assert [r.scale for r in records] == pytest.approx([expected_scale] * 2)

        scaled_w = 612 * expected_scale
        left_center = records[0].offset_x + scaled_w / 2
        right_center = records[1].offset_x + scaled_w / 2
        assert left_center + right_center == pytest.approx(A4_W)
        assert records[0].offset_y == pytest.approx(records[1].offset_y)


class TestValidation:

    @pytest.mark.parametrize("sheet", [(0, 800), (600, 0), (-1, 800)])
    def test_non_positive_sheet_raises_invalid_configuration(self, sheet):
        with pytest.raises(InvalidConfiguration):
            compute_slots(ArrangementMode.GRID, sheet[0], sheet[1], 612, 792)

    @pytest.mark.parametrize("source", [(0, 792), (612, 0), (-612, 792)])
    def test_non_positive_source_raises_invalid_document(self, source):
        with pytest.raises(InvalidDocument):
            compute_slots(ArrangementMode.GRID, A4_W, A4_H, source[0], source[1])

    def test_unknown_mode_raises_invalid_configuration(self):
        with pytest.raises(InvalidConfiguration, match="diagonal"):
            compute_slots("diagonal", A4_W, A4_H, 612, 792)


class TestLayoutFor:

    def test_layout_for_uses_config_sheet(self):
        config = LayoutConfig.from_choices("grid", "letter", rotate=True)

        records = layout_for(config, 612, 792)

        assert records == compute_slots(ArrangementMode.GRID, 612, 792, 612, 792, True)
