#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/color/renderer.py

import argparse
from typing import Dict

from scalelab.core import config as c
from scalelab.core.types import ColorResult
from scalelab.shared.formatting import format_colorspace
from scalelab.shared.preview import draw_bar, label, pass_fail, print_color_block, print_field
from scalelab.shared.truecolor import emit

_PAD = " " * 20


def _rgb255(result: ColorResult):
    return tuple(int(round(v * c.RGB_MAX)) for v in result.rgb)


def render_color_info(
    result: ColorResult,
    args: argparse.Namespace,
    levels: Dict[str, str],
    apca_level: str,
) -> None:
    """Strictly prints one generated color. Data must be pre-calculated by the engine."""
    hide_bars = getattr(args, "hide_bars", False)
    r, g, b = _rgb255(result)

    emit()
    print_color_block(result.hex, f"{c.BOLD_WHITE}generated{c.RESET}")

    emit()
    print_field("oklch", result.css_oklch)
    if not hide_bars:
        emit(f"{_PAD}{c.BOLD_WHITE}L{c.RESET} {draw_bar(result.lightness, 1.0, 200, 200, 200)}")
        emit(f"{_PAD}{c.BOLD_WHITE}C{c.RESET} {draw_bar(result.chroma, c.MAX_CHROMA, r, g, b)}")
        emit(f"{_PAD}{c.BOLD_WHITE}H{c.RESET} {draw_bar(result.hue, c.HUE_MAX, 255, 200, 0)}")
    print_field("display-p3", result.css_p3)
    print_field("hex", result.hex)
    print_field("rgb", result.css_rgb)
    print_field("hsl", result.css_hsl)

    info = result.gamut_info
    emit()
    print_field("gamut", result.gamut)
    print_field("requested", format_colorspace('oklch', info.original_lightness, info.original_chroma, info.original_hue))
    print_field("chroma removed", f"{info.chroma_reduction_fraction * 100:.1f}%")
    print_field("lightness shift", f"{info.lightness_shift * 100:+.2f}%")
    print_field("modified", "yes" if info.was_modified else "no")

    report = result.contrast
    if report is None:
        emit()
        return

    emit()
    emit(f"{label('apca')}{c.BOLD_WHITE}: {apca_level}{c.RESET}")
    for name, lc in zip(("black", "white", "gray"), report.apca):
        bar = "" if hide_bars else f" {draw_bar(lc, 108.0, r, g, b)}"
        emit(f"{_PAD}{c.BOLD_WHITE}{name:<6}{c.RESET}{bar} {format_colorspace('lc', lc)}")

    emit(f"{label('wcag')}{c.BOLD_WHITE}: AA {pass_fail(report.meets_aa)}{c.BOLD_WHITE}, "
          f"AAA {pass_fail(report.meets_aaa)}{c.RESET}")
    for name, ratio in zip(("black", "white", "gray"), report.wcag):
        bar = "" if hide_bars else f" {draw_bar(ratio - 1, c.WCAG_MAX_RATIO - 1, r, g, b)}"
        emit(f"{_PAD}{c.BOLD_WHITE}{name:<6}{c.RESET}{bar} {format_colorspace('ratio', ratio)}")

    emit(f"{label('best levels')}{c.BOLD_WHITE}: " + ", ".join(
        f"{key} {pass_fail(status == 'Pass')}{c.BOLD_WHITE}" for key, status in levels.items()
    ) + c.RESET)

    if result.specific_contrast is not None:
        apca, wcag = result.specific_contrast
        print_field(f"on {result.target_background}",
                    f"{format_colorspace('lc', apca)}, {format_colorspace('ratio', wcag)}")
    emit()
