"""
Компоновка полос штрихкода.

Turns the module bits of an encoded symbol into the minimal ordered list of
filled rectangles: one rectangle per maximal run of ``1`` bits.

Example:
    >>> rects = compact("1101", module_width=2, bar_height=100)
    >>> to_paths(rects)
    ['M0,0h4v100h-4z', 'M6,0h2v100h-2z']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence, Union

logger = logging.getLogger(__name__)

__all__ = [
    "Rectangle",
    "compact",
    "format_number",
    "to_paths",
]

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Print a coordinate like a JS template literal does.

    ``4`` not ``4.0``, ``0.00001`` not ``1e-05``. Exponent form only below
    1e-6 and from 1e21 up (``1e-7``, ``1e+21``).
    """
    if isinstance(value, bool):
        raise TypeError("Coordinate must be a number, got bool")
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'-' if exp < 0 else '+'}{abs(exp)}"


@dataclass(frozen=True)
class Rectangle:
    """One contiguous run of bars, in pixels."""

    x: Number
    y: Number
    width: Number
    height: Number

    def to_path(self) -> str:
        """Closed rectangular path: move, right, down, left, close."""
        w = format_number(self.width)
        return (
            f"M{format_number(self.x)},{format_number(self.y)}"
            f"h{w}v{format_number(self.height)}h-{w}z"
        )


def compact(
    bits: Sequence[str], module_width: Number, bar_height: Number
) -> List[Rectangle]:
    """
    Run-length compaction of module bits into rectangles.

    Args:
        bits: String (or sequence) of "0"/"1" symbols
        module_width: Pixel width of one module, already divided by the caller
        bar_height: Height of every bar

    Returns:
        Rectangles ordered by ascending x, y always 0.

    Raises:
        ValueError: on a symbol other than "0"/"1" or a negative module width.
    """
    if module_width < 0:
        raise ValueError(f"module_width must be >= 0, got {module_width!r}")

    rects: List[Rectangle] = []
    run_length = 0

    for b, bit in enumerate(bits):
        if bit == "1":
            run_length += 1
        elif bit == "0":
            if run_length > 0:
                rects.append(_run_rect(b - run_length, run_length, module_width, bar_height))
                run_length = 0
        else:
            raise ValueError(f"Invalid module symbol {bit!r} at position {b}")

    # trailing run has no closing "0"
    if run_length > 0:
        rects.append(_run_rect(len(bits) - run_length, run_length, module_width, bar_height))

    logger.debug(
        "Compacted %d modules into %d bars (module_width=%s)",
        len(bits),
        len(rects),
        module_width,
    )
    return rects


def _run_rect(start: int, length: int, module_width: Number, bar_height: Number) -> Rectangle:
    return Rectangle(
        x=start * module_width,
        y=0,
        width=length * module_width,
        height=bar_height,
    )


def to_paths(rectangles: Iterable[Rectangle]) -> List[str]:
    return [rect.to_path() for rect in rectangles]
