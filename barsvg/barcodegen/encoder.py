from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Union

import barcode as pybarcode
from barcode.errors import BarcodeError

from barsvg.barcodegen.errors import (
    InvalidFormatError,
    InvalidInputError,
    InvalidValueForFormatError,
)
from barsvg.model.enums import BarcodeFormat

logger = logging.getLogger(__name__)

# python-barcode signals bad values with BarcodeError, some classes with a bare KeyError/ValueError
_VALUE_ERRORS = (BarcodeError, KeyError, ValueError)

# Full code length (check digit included) of the check-digit symbologies.
# python-barcode truncates longer input and recomputes the check digit, so
# the payload has to be either this long or one digit shorter.
_CHECKED_LENGTHS: Dict[str, int] = {
    "ean13": 13,
    "ean8": 8,
    "ean14": 14,
    "upca": 12,
    "jan": 13,
    "isbn13": 13,
    "isbn10": 10,
    "issn": 8,
    "pzn": 7,
}

__all__ = [
    "EncodedSymbol",
    "SymbolEncoder",
    "EncoderFactory",
    "EncoderProvider",
    "PyBarcodeEncoder",
    "default_provider",
    "encode",
]


@dataclass(frozen=True)
class EncodedSymbol:
    """Module bits of one symbol plus its human readable text."""

    data: str
    text: Optional[str] = None

    def __len__(self) -> int:
        return len(self.data)


class SymbolEncoder(Protocol):
    def valid(self) -> bool: ...

    def encode(self) -> EncodedSymbol: ...


EncoderFactory = Callable[[str, Mapping[str, Any]], SymbolEncoder]


class PyBarcodeEncoder:
    """
    SymbolEncoder backed by a python-barcode class.

    Construction errors other than value errors (unknown class name, bad
    keyword options) propagate to the caller. Value errors raised by
    python-barcode while constructing or building the symbol are kept and
    reported through valid().

    Args:
        pybarcode_name: python-barcode class name ("code128", "ean13", ...)
        value: Payload string
        options: Extra keyword options for the python-barcode constructor
    """

    def __init__(
        self,
        pybarcode_name: str,
        value: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.pybarcode_name = pybarcode_name
        self.value = value
        self.options: Dict[str, Any] = dict(options) if options else {}
        self.error: Optional[Exception] = None
        self._lines: Optional[List[str]] = None

        bclass = pybarcode.get_barcode_class(pybarcode_name)
        try:
            self._inst: Any = bclass(value, writer=None, **self.options)
        except _VALUE_ERRORS as e:
            logger.debug("python-barcode rejected %r for %s: %s", value, pybarcode_name, e)
            self._inst = None
            self.error = e

    def _full_code(self) -> str:
        """Digits of the code python-barcode will draw, check digit last."""
        # ISBN-10 and ISSN are drawn as EAN-13 but keep their own short code
        if self.pybarcode_name in ("isbn10", "issn"):
            code = getattr(self._inst, self.pybarcode_name)
        else:
            code = self._inst.get_fullcode()
        return "".join(c for c in code if c.isdigit() or c in "Xx").upper()

    def _check_digits(self) -> Optional[BarcodeError]:
        """Reject payloads python-barcode would silently truncate or re-checksum."""
        full_length = _CHECKED_LENGTHS.get(self.pybarcode_name)
        if full_length is None:
            return None
        payload = self.value.replace("-", "").replace(" ", "").upper()
        if len(payload) not in (full_length - 1, full_length):
            return BarcodeError(
                f"{self.pybarcode_name} expects {full_length - 1} or "
                f"{full_length} digits, got {len(payload)}"
            )
        if len(payload) == full_length:
            expected = self._full_code()[-full_length:]
            if payload != expected:
                return BarcodeError(
                    f"Check digit mismatch for {self.pybarcode_name}: "
                    f"{payload} (expected {expected})"
                )
        return None

    def valid(self) -> bool:
        if self._inst is None:
            return False
        if self.error is None:
            self.error = self._check_digits()
        if self.error is not None:
            logger.debug("Rejected %r for %s: %s", self.value, self.pybarcode_name, self.error)
            return False
        if self._lines is None:
            try:
                self._lines = list(self._inst.build())
            except _VALUE_ERRORS as e:
                logger.debug("Build failed for %s: %s", self.pybarcode_name, e)
                self.error = e
                return False
        return True

    def encode(self) -> EncodedSymbol:
        if not self.valid():
            raise InvalidValueForFormatError(
                str(self.error) if self.error else None,
                format=self.pybarcode_name,
                value=self.value,
            )
        assert self._lines is not None
        # guard bars ("G") are drawn like ordinary bars
        data = "".join(self._lines).replace("G", "1")
        return EncodedSymbol(data=data, text=self._inst.get_fullcode())


class EncoderProvider:
    """Registry of encoder factories by format name (case-insensitive)."""

    def __init__(self) -> None:
        self._factories: Dict[str, EncoderFactory] = {}

    def register(self, name: str, factory: EncoderFactory) -> None:
        self._factories[name.upper()] = factory

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._factories

    def factory_for(self, name: str) -> EncoderFactory:
        try:
            return self._factories[name.upper()]
        except KeyError:
            raise InvalidFormatError(format=name) from None


def _pybarcode_factory(fmt: BarcodeFormat) -> EncoderFactory:
    def factory(value: str, options: Mapping[str, Any]) -> SymbolEncoder:
        return PyBarcodeEncoder(fmt.pybarcode_name, value, options)

    return factory


_default: Optional[EncoderProvider] = None


def default_provider() -> EncoderProvider:
    """Provider with a python-barcode factory for every BarcodeFormat (singleton)."""
    global _default
    if _default is None:
        provider = EncoderProvider()
        for fmt in BarcodeFormat:
            provider.register(fmt.value, _pybarcode_factory(fmt))
        _default = provider
    return _default


def encode(
    value: Any,
    format: Union[BarcodeFormat, str],
    options: Optional[Mapping[str, Any]] = None,
    provider: Optional[EncoderProvider] = None,
) -> EncodedSymbol:
    """
    Encode value into module bits with the encoder registered for format.

    Raises:
        InvalidInputError: value is not a non-empty string (checked first).
        InvalidFormatError: unknown format or the encoder could not be built.
        InvalidValueForFormatError: the encoder reports the value invalid.
    """
    format_name = format.value if isinstance(format, BarcodeFormat) else format
    if not isinstance(value, str) or not value:
        raise InvalidInputError(format=format_name, value=value)
    if not isinstance(format_name, str) or not format_name:
        raise InvalidFormatError(format=format_name, value=value)

    provider = provider or default_provider()
    factory = provider.factory_for(format_name)

    try:
        encoder = factory(value, dict(options) if options else {})
    except Exception as e:
        logger.debug("Encoder construction failed for %s: %s", format_name, e)
        raise InvalidFormatError(format=format_name, value=value) from e

    if not encoder.valid():
        raise InvalidValueForFormatError(format=format_name, value=value)

    encoded = encoder.encode()
    logger.debug(
        "Encoded %r as %s: %d modules", value, format_name, len(encoded.data)
    )
    return encoded
