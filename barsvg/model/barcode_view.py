# RU: Модель виджета штрихкода: свойства, кеш последней раскладки, доставка ошибок через callback или исключение.
# EN: Barcode view model: props, cached bar layout, error delivery through on_error or raise.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Tuple

from barsvg.barcodegen.encoder import EncoderProvider
from barsvg.barcodegen.errors import BarcodeRenderError
from barsvg.barcodegen.layout import Number, Rectangle
from barsvg.barcodegen.render import RenderOptions, RenderResult, RenderState, render
from barsvg.barcodegen.svg import (
    BORDER_RADIUS,
    CAPTION_MARGIN_TOP,
    PADDING_HORIZONTAL,
    PADDING_VERTICAL,
    render_svg,
)

from .enums import DEFAULT_FORMAT_NAME

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[BarcodeRenderError], Any]


@dataclass
class BarcodeView:
    """
    Host-side barcode widget state.

    Props mirror the widget properties; the rest is state owned by this
    instance and replaced in place on every successful update().

    Examples (integration):
        view = BarcodeView(value="HELLO", on_error=errors.append)
        view.on_layout(330)         # container width incl. padding
        svg = view.to_svg()
    """

    schema_version: ClassVar[str] = "1.0"
    OBSERVED_PROPS: ClassVar[FrozenSet[str]] = frozenset(
        {"value", "format", "text", "height", "display_value", "encoder_options"}
    )

    # ---- props ----
    value: Optional[str] = None
    format: str = DEFAULT_FORMAT_NAME
    text: Optional[str] = None
    width: Number = 0
    height: Number = 100
    line_color: str = "#000000"
    text_color: str = "#000000"
    text_font: str = "System"
    background: str = "#ffffff"
    font_size: int = 15
    display_value: bool = False
    encoder_options: Dict[str, Any] = field(default_factory=dict)
    on_error: Optional[ErrorCallback] = field(default=None, compare=False, repr=False)
    provider: Optional[EncoderProvider] = field(default=None, compare=False, repr=False)

    # ---- state ----
    bars: List[str] = field(default_factory=list, compare=False)
    rectangles: Tuple[Rectangle, ...] = field(default=(), compare=False)
    caption: Optional[str] = field(default=None, compare=False)
    last_error: Optional[BarcodeRenderError] = field(default=None, compare=False)
    layout_width: Number = field(default=0, compare=False)

    def __post_init__(self) -> None:
        self.layout_width = self.width

    # ---- render cycle ----

    def render_state(self) -> RenderState:
        return RenderState(
            value=self.value,
            format=self.format,
            options=RenderOptions(
                height=self.height,
                text=self.text,
                display_value=self.display_value,
                encoder_options=dict(self.encoder_options),
            ),
            available_width=self.layout_width,
        )

    def update(self) -> Optional[RenderResult]:
        """
        Recompute the bars for the current props and width.

        Returns: the RenderResult, or None when the error went to on_error
        Raises: BarcodeRenderError when rendering fails and on_error is not set
        """
        result = render(self.render_state(), provider=self.provider)
        if result.error is not None:
            self.last_error = result.error
            if self.on_error is not None:
                logger.warning(
                    "Barcode error delivered to on_error: %s", result.error.message
                )
                self.on_error(result.error)
                return None
            raise result.error

        self.rectangles = result.rectangles
        self.bars = list(result.paths)
        self.caption = result.caption
        self.last_error = None
        return result

    def on_layout(self, layout_width: Number) -> Optional[RenderResult]:
        """Container was laid out; bars get its width minus horizontal padding."""
        self.layout_width = max(layout_width - 2 * PADDING_HORIZONTAL, 0)
        return self.update()

    def set_props(self, **changes: Any) -> Optional[RenderResult]:
        """Apply prop changes; recompute only if an observed prop changed."""
        known = set(self._PROP_NAMES) | {"on_error", "provider"}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown BarcodeView props: {sorted(unknown)}")

        changed = set()
        for name, new in changes.items():
            if getattr(self, name) != new:
                setattr(self, name, new)
                changed.add(name)
        if "width" in changed and self.width:
            self.layout_width = self.width
        if not changed & (self.OBSERVED_PROPS | {"width"}):
            return None
        return self.update()

    # ---- layout descriptors ----

    def container_style(self) -> Dict[str, Any]:
        style: Dict[str, Any]
        if self.width == 0:
            style = {"flex": 1, "align_self": "stretch"}
        else:
            style = {"width": self.width}
        style.update(
            {
                "align_items": "center",
                "background_color": self.background,
                "padding_left": PADDING_HORIZONTAL,
                "padding_right": PADDING_HORIZONTAL,
                "padding_top": PADDING_VERTICAL,
                "padding_bottom": PADDING_VERTICAL,
                "border_radius": BORDER_RADIUS,
            }
        )
        return style

    def caption_style(self) -> Dict[str, Any]:
        return {
            "font_size": self.font_size,
            "margin_top": CAPTION_MARGIN_TOP,
            "color": self.text_color,
            "width": self.layout_width,
            "text_align": "center",
            "font_family": self.text_font,
        }

    def to_svg(self) -> str:
        """SVG document for the cached state (update() first)."""
        result = RenderResult(rectangles=self.rectangles, caption=self.caption)
        return render_svg(
            result,
            width=self.layout_width,
            height=self.height,
            line_color=self.line_color,
            background=self.background,
            text_color=self.text_color,
            text_font=self.text_font,
            font_size=self.font_size,
        )

    # ---- (de)serialization ----

    _PROP_NAMES: ClassVar[Tuple[str, ...]] = (
        "value",
        "format",
        "text",
        "width",
        "height",
        "line_color",
        "text_color",
        "text_font",
        "background",
        "font_size",
        "display_value",
        "encoder_options",
    )

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], value: Optional[str] = None, **overrides: Any
    ) -> "BarcodeView":
        """Build a view from load_config() output; unrelated keys are ignored."""
        props = {k: config[k] for k in cls._PROP_NAMES if k in config}
        props.update(overrides)
        if value is not None:
            props["value"] = value
        return cls(**props)

    def to_dict(self) -> Dict[str, Any]:
        dct = {name: getattr(self, name) for name in self._PROP_NAMES}
        dct["encoder_options"] = dict(self.encoder_options)
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BarcodeView":
        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        return cls(**d)

    def __str__(self) -> str:
        shown = "" if self.value is None else str(self.value)
        shown = shown[:16] + ("..." if len(shown) > 16 else "")
        return f"BarcodeView({self.format}, value={shown}, bars={len(self.bars)})"
