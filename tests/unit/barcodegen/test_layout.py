from typing import List

import pytest

from barsvg.barcodegen.layout import Rectangle, compact, format_number, to_paths


def _reconstruct(rects: List[Rectangle], length: int, module_width: float) -> str:
    bits = ["0"] * length
    for r in rects:
        start = round(r.x / module_width)
        run = round(r.width / module_width)
        for i in range(start, start + run):
            bits[i] = "1"
    return "".join(bits)


def _runs_of_ones(bits: str) -> int:
    return len([chunk for chunk in bits.split("0") if chunk])


class TestCompact:
    """Run-length compaction of module bits."""

    def test_scenario_1101(self) -> None:
        rects = compact("1101", module_width=2, bar_height=100)
        assert rects == [
            Rectangle(x=0, y=0, width=4, height=100),
            Rectangle(x=6, y=0, width=2, height=100),
        ]
        assert to_paths(rects) == ["M0,0h4v100h-4z", "M6,0h2v100h-2z"]

    def test_empty_bits(self) -> None:
        assert compact("", module_width=3, bar_height=50) == []

    def test_single_one(self) -> None:
        rects = compact("1", module_width=2.5, bar_height=10)
        assert rects == [Rectangle(x=0, y=0, width=2.5, height=10)]

    def test_only_zeros(self) -> None:
        assert compact("0000", module_width=1, bar_height=10) == []

    def test_trailing_run_not_dropped(self) -> None:
        rects = compact("1010011", module_width=1, bar_height=20)
        assert [(r.x, r.width) for r in rects] == [(0, 1), (2, 1), (5, 2)]

    def test_all_ones_is_one_bar(self) -> None:
        rects = compact("11111", module_width=3, bar_height=7)
        assert rects == [Rectangle(x=0, y=0, width=15, height=7)]

    def test_accepts_list_of_symbols(self) -> None:
        assert compact(["1", "1", "0", "1"], 2, 100) == compact("1101", 2, 100)

    def test_ordered_by_x_and_y_zero(self) -> None:
        rects = compact("0110111010001", module_width=1.5, bar_height=40)
        xs = [r.x for r in rects]
        assert xs == sorted(xs)
        assert all(r.y == 0 and r.height == 40 for r in rects)

    def test_no_overlaps(self) -> None:
        rects = compact("1011001110", module_width=4, bar_height=1)
        for left, right in zip(rects, rects[1:]):
            assert left.x + left.width < right.x

    def test_idempotent(self) -> None:
        first = compact("110100111", 0.7, 33)
        second = compact("110100111", 0.7, 33)
        assert first == second

    def test_coordinates_scaled_from_index(self) -> None:
        # 0.1 * index, not a running sum of 0.1
        bits = "10" * 50 + "1"
        rects = compact(bits, module_width=0.1, bar_height=1)
        assert rects[-1].x == 100 * 0.1
        assert rects[37].x == 74 * 0.1

    def test_zero_module_width_allowed(self) -> None:
        rects = compact("101", module_width=0, bar_height=10)
        assert [r.width for r in rects] == [0, 0]

    def test_negative_module_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="module_width"):
            compact("101", module_width=-1, bar_height=10)

    @pytest.mark.parametrize("bad", ["10201", "1x", "1 0"])
    def test_invalid_symbol_rejected(self, bad: str) -> None:
        with pytest.raises(ValueError, match="Invalid module symbol"):
            compact(bad, module_width=1, bar_height=1)


@pytest.mark.parametrize(
    "bits",
    [
        "0",
        "1",
        "01",
        "10",
        "1101",
        "1010011",
        "0001000",
        "111000111000111",
        "1100110011100011101011",
        "0101010101010101",
    ],
)
@pytest.mark.parametrize("module_width", [1, 2, 0.5])
def test_rectangles_reconstruct_bits(bits: str, module_width: float) -> None:
    rects = compact(bits, module_width, bar_height=10)
    assert _reconstruct(rects, len(bits), module_width) == bits
    assert len(rects) == _runs_of_ones(bits)


class TestPathFormat:
    def test_rectangle_path(self) -> None:
        assert Rectangle(6, 0, 2, 100).to_path() == "M6,0h2v100h-2z"

    def test_integral_floats_printed_without_decimal(self) -> None:
        assert Rectangle(4.0, 0.0, 2.0, 100.0).to_path() == "M4,0h2v100h-2z"

    def test_fractional_values(self) -> None:
        assert Rectangle(1.5, 0, 0.75, 80).to_path() == "M1.5,0h0.75v80h-0.75z"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "0"),
            (12, "12"),
            (3.0, "3"),
            (2.5, "2.5"),
            (0.1 * 3, "0.30000000000000004"),
            (0.00001, "0.00001"),
            (0.000015, "0.000015"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (2.5e-8, "2.5e-8"),
            (1e16, "10000000000000000"),
            (1e21, "1e+21"),
        ],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_format_number_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            format_number(True)

    def test_to_paths_empty(self) -> None:
        assert to_paths([]) == []
