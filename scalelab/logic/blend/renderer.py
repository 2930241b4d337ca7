#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/blend/renderer.py

import argparse
from typing import List, Optional, Sequence

from scalelab.core import config as c
from scalelab.core.blending import OpacityMatch
from scalelab.core.types import BlendResult, ContrastValues
from scalelab.shared.formatting import format_colorspace
from scalelab.shared.preview import print_color_block, print_field, swatch
from scalelab.shared.truecolor import emit


def render_opacity_steps(
    args: argparse.Namespace,
    opacities: Sequence[float],
    row: List[BlendResult],
    contrasts: List[ContrastValues],
) -> None:
    emit()
    print_color_block(args.background, f"{c.BOLD_WHITE}background{c.RESET}")
    print_field("mode", args.blend_mode)
    emit()
    for opacity, result, contrast in zip(opacities, row, contrasts):
        title = f"{c.MSG_BOLD_COLORS['info']}{opacity:g}%{c.RESET}"
        print_color_block(result.hex, title, end="")
        emit(f"  L* {result.lightness:5.1f}  {format_colorspace('lc', contrast.apca):>9}  "
              f"{format_colorspace('ratio', contrast.wcag)}")
    emit()


def render_matrix(
    lightness_steps: Sequence[float],
    opacities: Sequence[float],
    matrix: List[List[BlendResult]],
    bg_hex: str,
) -> None:
    """Grid of composited swatches: lightness rows by opacity columns."""
    emit()
    print_color_block(bg_hex, f"{c.BOLD_WHITE}background{c.RESET}")
    emit()
    header = "".join(f"{op:>5g}" for op in opacities)
    emit(f"{'':>6}{c.BOLD_WHITE}{header}{c.RESET}")
    for step, row in zip(lightness_steps, matrix):
        cells = "".join(f" {swatch(result.hex, 4)}" for result in row)
        emit(f"{c.MSG_BOLD_COLORS['info']}{step:>5g}{c.RESET}{cells}")
    emit()


def render_min_opacity(target: str, opacity: Optional[int]) -> None:
    if opacity is None:
        print_field(f"min opacity {target}", f"{c.MSG_BOLD_COLORS['error']}unreachable{c.RESET}")
    else:
        print_field(f"min opacity {target}", f"{opacity}%")


def render_match(target_lightness: float, match: OpacityMatch) -> None:
    print_field(f"closest to L* {target_lightness:g}",
                f"{match.opacity:g}% ({match.result.hex}, L* {match.result.lightness:.1f})")
