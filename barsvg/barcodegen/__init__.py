"""
barcodegen

Раскладка 1D штрихкода в векторные пути (SVG path) поверх python-barcode.

Public API:
    - encode: value + format → EncodedSymbol (через python-barcode)
    - compact: биты модулей → список Rectangle
    - render: RenderState → RenderResult (прямоугольники или ошибка)
    - render_svg: RenderResult → SVG-документ
    - BarcodeRenderError и подклассы: типизированные ошибки

Примеры:
    >>> from barsvg.barcodegen import RenderState, render
    >>> result = render(RenderState("HELLO", "CODE128", available_width=300))
    >>> result.ok
    True

Зависимости:
    python-barcode, Pillow, svgwrite
"""

from barsvg.barcodegen.encoder import (
    EncodedSymbol,
    EncoderProvider,
    PyBarcodeEncoder,
    SymbolEncoder,
    default_provider,
    encode,
)
from barsvg.barcodegen.errors import (
    BarcodeRenderError,
    ErrorKind,
    InvalidFormatError,
    InvalidInputError,
    InvalidValueForFormatError,
)
from barsvg.barcodegen.layout import Rectangle, compact, to_paths
from barsvg.barcodegen.render import RenderOptions, RenderResult, RenderState, render
from barsvg.barcodegen.svg import normalize_color, render_svg

__all__ = [
    "EncodedSymbol",
    "EncoderProvider",
    "PyBarcodeEncoder",
    "SymbolEncoder",
    "default_provider",
    "encode",
    "BarcodeRenderError",
    "ErrorKind",
    "InvalidFormatError",
    "InvalidInputError",
    "InvalidValueForFormatError",
    "Rectangle",
    "compact",
    "to_paths",
    "RenderOptions",
    "RenderResult",
    "RenderState",
    "render",
    "normalize_color",
    "render_svg",
]
