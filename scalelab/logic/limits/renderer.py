#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/limits/renderer.py

from scalelab.core import config as c
from scalelab.core.conversions import oklch_to_hex
from scalelab.shared.preview import draw_bar, print_field, swatch
from scalelab.shared.truecolor import emit


def render_limits(hue: float, gamut: str, multiplier: float, rows) -> None:
    emit()
    print_field("hue", f"{hue:g}")
    print_field("gamut", gamut)
    print_field("compensation", f"x{multiplier:.3f}")
    emit()
    emit(f"{c.BOLD_WHITE}{'L':>5}  {'table':>7}  {'measured':>8}  {'suggest':>7}{c.RESET}")
    for row in rows:
        color = oklch_to_hex(row.lightness / c.PERCENT_TO_FACTOR, row.measured, hue)
        diff = row.measured - row.table
        emit(f"{row.lightness:>5g}  {row.table:7.4f}  {row.measured:8.4f}  {row.suggested:7.4f}  "
              f"{swatch(color, 4)} {draw_bar(row.measured, c.MAX_CHROMA, 200, 200, 200, 12)} {diff:+.4f}")
    emit()
