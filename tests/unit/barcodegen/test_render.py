from typing import Any, Mapping

import pytest

from barsvg.barcodegen.encoder import EncodedSymbol, EncoderProvider
from barsvg.barcodegen.errors import (
    ErrorKind,
    InvalidFormatError,
    InvalidInputError,
    InvalidValueForFormatError,
)
from barsvg.barcodegen.layout import Rectangle
from barsvg.barcodegen.render import RenderOptions, RenderResult, RenderState, render


class _FixedEncoder:
    def __init__(self, value: str, options: Mapping[str, Any]) -> None:
        self.value = value

    def valid(self) -> bool:
        return self.value.isdigit()

    def encode(self) -> EncodedSymbol:
        return EncodedSymbol(data="1101", text="1101-text")


@pytest.fixture
def provider() -> EncoderProvider:
    p = EncoderProvider()
    p.register("FIXED", _FixedEncoder)
    return p


class TestRender:
    def test_module_width_from_available_width(self, provider: EncoderProvider) -> None:
        state = RenderState("42", "FIXED", RenderOptions(height=100), available_width=8)
        result = render(state, provider=provider)
        assert result.ok
        assert result.module_width == 2
        assert result.paths == ("M0,0h4v100h-4z", "M6,0h2v100h-2z")
        assert result.unwrap() == (
            Rectangle(0, 0, 4, 100),
            Rectangle(6, 0, 2, 100),
        )

    def test_symbol_kept_on_result(self, provider: EncoderProvider) -> None:
        result = render(RenderState("1", "FIXED", available_width=4), provider=provider)
        assert result.symbol == EncodedSymbol(data="1101", text="1101-text")

    def test_zero_width_before_layout(self, provider: EncoderProvider) -> None:
        result = render(RenderState("1", "FIXED"), provider=provider)
        assert result.module_width == 0
        assert [r.width for r in result.rectangles] == [0, 0]

    def test_caption_override(self, provider: EncoderProvider) -> None:
        opts = RenderOptions(text="Label")
        result = render(RenderState("1", "FIXED", opts, 4), provider=provider)
        assert result.caption == "Label"

    def test_no_caption_by_default(self, provider: EncoderProvider) -> None:
        result = render(RenderState("1", "FIXED", available_width=4), provider=provider)
        assert result.caption is None

    def test_display_value_uses_encoder_text(self, provider: EncoderProvider) -> None:
        opts = RenderOptions(display_value=True)
        result = render(RenderState("1", "FIXED", opts, 4), provider=provider)
        assert result.caption == "1101-text"

    def test_override_wins_over_display_value(self, provider: EncoderProvider) -> None:
        opts = RenderOptions(text="X", display_value=True)
        result = render(RenderState("1", "FIXED", opts, 4), provider=provider)
        assert result.caption == "X"

    def test_pure(self, provider: EncoderProvider) -> None:
        state = RenderState("7", "FIXED", available_width=12)
        assert render(state, provider=provider) == render(state, provider=provider)


class TestRenderErrors:
    """Errors are carried in the result, never raised."""

    def test_unknown_format(self, provider: EncoderProvider) -> None:
        result = render(RenderState("1", "NOPE", available_width=10), provider=provider)
        assert not result.ok
        assert isinstance(result.error, InvalidFormatError)
        assert result.rectangles == ()
        with pytest.raises(InvalidFormatError):
            result.unwrap()

    def test_invalid_value(self, provider: EncoderProvider) -> None:
        result = render(RenderState("abc", "FIXED"), provider=provider)
        assert isinstance(result.error, InvalidValueForFormatError)
        assert result.error.kind is ErrorKind.INVALID_VALUE_FOR_FORMAT

    @pytest.mark.parametrize("value", [None, ""])
    def test_invalid_input(self, provider: EncoderProvider, value: Any) -> None:
        result = render(RenderState(value, "FIXED"), provider=provider)
        assert isinstance(result.error, InvalidInputError)
        assert result.paths == ()

    def test_none_value_is_not_encoded_as_text(self) -> None:
        result = render(RenderState(None, "CODE128", available_width=100))
        assert isinstance(result.error, InvalidInputError)


def test_render_with_python_barcode() -> None:
    state = RenderState("HELLO", "CODE128", RenderOptions(height=50), available_width=300)
    result = render(state)
    assert result.ok
    assert result.symbol is not None
    assert result.module_width == 300 / len(result.symbol.data)
    covered = sum(r.width for r in result.rectangles)
    assert covered == pytest.approx(result.symbol.data.count("1") * result.module_width)
    last = result.rectangles[-1]
    assert last.x + last.width == pytest.approx(300)


def test_result_defaults() -> None:
    result = RenderResult()
    assert result.ok
    assert result.unwrap() == ()
