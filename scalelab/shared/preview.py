#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/preview.py

from scalelab.core.conversions import hex_to_srgb
from scalelab.core import config as c
from .truecolor import emit, strip_ansi, swatches_enabled

LABEL_WIDTH = 18


def get_visible_len(s: str) -> int:
    return len(strip_ansi(s))


def label(text: str, color: str = "info") -> str:
    """Bold colored label padded to the shared column width."""
    padding = " " * max(0, LABEL_WIDTH - len(text))
    return f"{c.MSG_BOLD_COLORS[color]}{text}{c.RESET}{padding}"


def print_field(name: str, value: str) -> None:
    emit(f"{label(name)}{c.BOLD_WHITE}: {value}{c.RESET}")


def swatch(hex_code: str, width: int = 16) -> str:
    """ANSI background block for `hex_code`, or an empty box when colors are off."""
    if not swatches_enabled():
        return "[" + " " * (width - 2) + "]"
    r, g, b = (int(round(v * c.RGB_MAX)) for v in hex_to_srgb(hex_code))
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, LABEL_WIDTH - vis_len)

    emit(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   {swatch(hex_code)}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)


def draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int, total_len: int = 16) -> str:
    """ANSI-colored bar showing `val` as a fraction of `max_val`."""
    abs_val = min(abs(val), max_val)
    percent = abs_val / max_val if max_val else 0.0
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    if val < 0:
        return f"{empty_ansi}{'░' * empty}{c.RESET}{color_ansi}{'█' * filled}{c.RESET}"
    return f"{color_ansi}{'█' * filled}{c.RESET}{empty_ansi}{'░' * empty}{c.RESET}"


def pass_fail(passed: bool) -> str:
    if passed:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"
