"""
Чистая функция рендеринга: состояние → прямоугольники или типизированная ошибка.

render() never raises for the three BarcodeRenderError kinds; the error is
carried in the RenderResult so the host decides whether to surface or
suppress it. The host calls render() whenever value, format, options or
available width change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from barsvg.barcodegen.encoder import EncodedSymbol, EncoderProvider, encode
from barsvg.barcodegen.errors import BarcodeRenderError
from barsvg.barcodegen.layout import Number, Rectangle, compact, to_paths
from barsvg.model.enums import DEFAULT_FORMAT_NAME, BarcodeFormat

logger = logging.getLogger(__name__)

__all__ = [
    "RenderOptions",
    "RenderState",
    "RenderResult",
    "render",
]

DEFAULT_BAR_HEIGHT = 100


@dataclass(frozen=True)
class RenderOptions:
    """
    Options of one render pass.

    Attributes:
        height: Bar height in pixels
        text: Caption override; shown instead of the encoder text
        display_value: Show the encoder text when no override is given
        encoder_options: Keyword options forwarded to the encoder factory
    """

    height: Number = DEFAULT_BAR_HEIGHT
    text: Optional[str] = None
    display_value: bool = False
    encoder_options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderState:
    value: Any
    format: Union[BarcodeFormat, str] = DEFAULT_FORMAT_NAME
    options: RenderOptions = field(default_factory=RenderOptions)
    available_width: Number = 0


@dataclass(frozen=True)
class RenderResult:
    rectangles: Tuple[Rectangle, ...] = ()
    caption: Optional[str] = None
    module_width: Number = 0
    symbol: Optional[EncodedSymbol] = None
    error: Optional[BarcodeRenderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(to_paths(self.rectangles))

    def unwrap(self) -> Tuple[Rectangle, ...]:
        """Return the rectangles or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.rectangles


def render(
    state: RenderState, provider: Optional[EncoderProvider] = None
) -> RenderResult:
    try:
        symbol = encode(
            state.value,
            state.format,
            state.options.encoder_options,
            provider=provider,
        )
    except BarcodeRenderError as e:
        logger.debug("Render of %r failed: %s", state.value, e)
        return RenderResult(error=e)

    module_width: Number = (
        state.available_width / len(symbol.data) if symbol.data else 0
    )
    rectangles = compact(symbol.data, module_width, state.options.height)

    caption = state.options.text
    if caption is None and state.options.display_value:
        caption = symbol.text

    return RenderResult(
        rectangles=tuple(rectangles),
        caption=caption,
        module_width=module_width,
        symbol=symbol,
    )
