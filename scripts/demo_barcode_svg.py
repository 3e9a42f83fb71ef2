#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Demo script: render a few barcodes to standalone SVG files.

Usage:
    python scripts/demo_barcode_svg.py [output_dir]
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

from barsvg import BarcodeRenderError, BarcodeView, get_logger, load_config

logger = get_logger(__name__)

SAMPLES: List[Tuple[str, str]] = [
    ("CODE128", "Hello-123"),
    ("EAN13", "5901234123457"),
    ("EAN8", "96385074"),
    ("CODE39", "BARSVG"),
    ("ITF", "12345678"),
    ("EAN13", "not-a-number"),
]


def print_banner(text: str) -> None:
    """Print section banner."""
    print()
    print("=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main() -> int:
    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("demo_svg")
    out_dir.mkdir(parents=True, exist_ok=True)
    config = load_config()

    print_banner("barsvg demo")
    errors: List[BarcodeRenderError] = []

    for fmt, value in SAMPLES:
        view = BarcodeView.from_config(
            config, value=value, format=fmt, text=value, on_error=errors.append
        )
        if view.on_layout(330) is None:
            print(f"❌ {fmt:<8} {value!r}: {errors[-1].message}")
            continue
        target = out_dir / f"{fmt.lower()}_{value}.svg"
        target.write_text(view.to_svg(), encoding="utf-8")
        print(f"✅ {fmt:<8} {value!r}: {len(view.bars)} bars -> {target}")

    logger.info("Demo finished, %d errors", len(errors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
