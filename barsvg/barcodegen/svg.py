"""
SVG-поверхность для готовой раскладки полос.

Builds a standalone SVG document equivalent to the widget container: a
rounded background, the bars as one filled path inside the padding, and an
optional centred caption below the bars.
"""

from __future__ import annotations

import logging
from typing import Final

import svgwrite
from PIL import ImageColor

from barsvg.barcodegen.layout import Number, format_number
from barsvg.barcodegen.render import RenderResult

logger = logging.getLogger(__name__)

__all__ = [
    "PADDING_HORIZONTAL",
    "PADDING_VERTICAL",
    "BORDER_RADIUS",
    "CAPTION_MARGIN_TOP",
    "normalize_color",
    "render_svg",
]


PADDING_HORIZONTAL: Final[int] = 15
PADDING_VERTICAL: Final[int] = 10
BORDER_RADIUS: Final[int] = 10
CAPTION_MARGIN_TOP: Final[int] = 5


def normalize_color(color: str) -> str:
    """
    Parse any Pillow colour spec ("#000", "red", "rgb(0,0,0)") into "#rrggbb".

    Raises:
        ValueError: unparseable colour.
    """
    if not isinstance(color, str):
        raise ValueError(f"Color must be a string, got {type(color)!r}")
    rgb = ImageColor.getrgb(color)
    return "#{:02x}{:02x}{:02x}".format(*rgb[:3])


def render_svg(
    result: RenderResult,
    *,
    width: Number,
    height: Number,
    line_color: str = "#000000",
    background: str = "#ffffff",
    text_color: str = "#000000",
    text_font: str = "System",
    font_size: int = 15,
) -> str:
    """
    Args:
        result: Successful render result
        width: Width of the bar surface (without padding)
        height: Bar height

    Returns:
        SVG document as a unicode string.
    """
    result.unwrap()

    caption_height = font_size + CAPTION_MARGIN_TOP if result.caption else 0
    total_w = width + 2 * PADDING_HORIZONTAL
    total_h = height + 2 * PADDING_VERTICAL + caption_height

    dwg = svgwrite.Drawing(
        size=(format_number(total_w), format_number(total_h)), debug=False
    )
    dwg.add(
        dwg.rect(
            insert=(0, 0),
            size=(format_number(total_w), format_number(total_h)),
            rx=BORDER_RADIUS,
            fill=normalize_color(background),
        )
    )
    if result.rectangles:
        dwg.add(
            dwg.path(
                d="".join(result.paths),
                fill=normalize_color(line_color),
                transform=f"translate({PADDING_HORIZONTAL},{PADDING_VERTICAL})",
            )
        )
    if result.caption:
        dwg.add(
            dwg.text(
                result.caption,
                insert=(
                    format_number(total_w / 2),
                    format_number(PADDING_VERTICAL + height + CAPTION_MARGIN_TOP + font_size),
                ),
                fill=normalize_color(text_color),
                font_family=text_font,
                font_size=font_size,
                text_anchor="middle",
            )
        )

    logger.debug("SVG built: %d bars, %sx%s", len(result.rectangles), total_w, total_h)
    return dwg.tostring()
