from barsvg.model.enums import BarcodeFormat

__all__ = ["BarcodeFormat"]
