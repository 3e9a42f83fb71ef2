"""
model/enums.py

(Краткое RU: Перечисление поддерживаемых форматов штрихкода и их имена в python-barcode.)

EN: Barcode formats accepted by the view. Names follow the JsBarcode-style
format names; each member maps onto a python-barcode class name.
NO encoding logic here!
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Final, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)

DEFAULT_FORMAT_NAME: Final[str] = "CODE128"


class BarcodeFormat(str, Enum):
    CODE128 = "CODE128"
    CODE39 = "CODE39"
    EAN13 = "EAN13"
    EAN8 = "EAN8"
    EAN14 = "EAN14"
    UPC = "UPC"
    ITF = "ITF"
    CODABAR = "codabar"
    ISBN13 = "ISBN13"
    ISBN10 = "ISBN10"
    ISSN = "ISSN"
    JAN = "JAN"
    PZN = "PZN"
    GS1_128 = "GS1_128"

    @property
    def pybarcode_name(self) -> str:
        return _PYBARCODE_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> "BarcodeFormat":
        """Resolve a format name case-insensitively ("ean13", "EAN13", "Codabar")."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Barcode format must be a string, got {type(name)!r}")
        key = name.strip().upper()
        for member in cls:
            if member.value.upper() == key or member.name == key:
                return member
        _logger.debug("Unknown barcode format %r", name)
        raise ValueError(f"Unknown barcode format: {name!r}")

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            BarcodeFormat.CODE128: "Code 128",
            BarcodeFormat.CODE39: "Code 39",
            BarcodeFormat.EAN13: "EAN-13",
            BarcodeFormat.EAN8: "EAN-8",
            BarcodeFormat.EAN14: "EAN-14 (товар/короб)",
            BarcodeFormat.UPC: "UPC-A",
            BarcodeFormat.ITF: "ITF (чередующийся 2 из 5)",
            BarcodeFormat.CODABAR: "Codabar",
            BarcodeFormat.ISBN13: "ISBN-13",
            BarcodeFormat.ISBN10: "ISBN-10",
            BarcodeFormat.ISSN: "ISSN",
            BarcodeFormat.JAN: "JAN",
            BarcodeFormat.PZN: "PZN (фармацевтический)",
            BarcodeFormat.GS1_128: "GS1-128",
        }
        names_en = {
            BarcodeFormat.CODE128: "Code 128",
            BarcodeFormat.CODE39: "Code 39",
            BarcodeFormat.EAN13: "EAN-13",
            BarcodeFormat.EAN8: "EAN-8",
            BarcodeFormat.EAN14: "EAN-14 (shipping)",
            BarcodeFormat.UPC: "UPC-A",
            BarcodeFormat.ITF: "ITF (interleaved 2 of 5)",
            BarcodeFormat.CODABAR: "Codabar",
            BarcodeFormat.ISBN13: "ISBN-13",
            BarcodeFormat.ISBN10: "ISBN-10",
            BarcodeFormat.ISSN: "ISSN",
            BarcodeFormat.JAN: "JAN",
            BarcodeFormat.PZN: "PZN (pharmaceutical)",
            BarcodeFormat.GS1_128: "GS1-128",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


_PYBARCODE_NAMES: Final[Dict[BarcodeFormat, str]] = {
    BarcodeFormat.CODE128: "code128",
    BarcodeFormat.CODE39: "code39",
    BarcodeFormat.EAN13: "ean13",
    BarcodeFormat.EAN8: "ean8",
    BarcodeFormat.EAN14: "ean14",
    BarcodeFormat.UPC: "upca",
    BarcodeFormat.ITF: "itf",
    BarcodeFormat.CODABAR: "codabar",
    BarcodeFormat.ISBN13: "isbn13",
    BarcodeFormat.ISBN10: "isbn10",
    BarcodeFormat.ISSN: "issn",
    BarcodeFormat.JAN: "jan",
    BarcodeFormat.PZN: "pzn",
    BarcodeFormat.GS1_128: "gs1_128",
}
