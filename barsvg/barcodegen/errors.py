"""
Исключения рендеринга штрихкода.

Иерархия:
    BarcodeRenderError (базовое)
    ├── InvalidInputError
    ├── InvalidFormatError
    └── InvalidValueForFormatError

All three kinds share one severity; they differ only in kind and message.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

__all__ = [
    "ErrorKind",
    "BarcodeRenderError",
    "InvalidInputError",
    "InvalidFormatError",
    "InvalidValueForFormatError",
]


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_FORMAT = "invalid_format"
    INVALID_VALUE_FOR_FORMAT = "invalid_value_for_format"


class BarcodeRenderError(Exception):
    """
    Base error for encoding and layout of a barcode.

    Attributes:
        message: Human readable message
        kind: ErrorKind of the failure
        format: Requested format name (optional)
        value: Offending value (optional)
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT
    default_message: str = "Invalid barcode input."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        format: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.message = message or self.default_message
        self.format = format
        self.value = value
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, format={self.format!r})"


class InvalidInputError(BarcodeRenderError):
    """Value is missing, empty or not a string."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "Barcode value must be a non-empty string."


class InvalidFormatError(BarcodeRenderError):
    """Unknown symbology or the encoder could not be constructed."""

    kind = ErrorKind.INVALID_FORMAT
    default_message = "Invalid barcode format."


class InvalidValueForFormatError(BarcodeRenderError):
    """Value rejected by the symbology (charset, length, checksum)."""

    kind = ErrorKind.INVALID_VALUE_FOR_FORMAT
    default_message = "Invalid barcode for selected format."
