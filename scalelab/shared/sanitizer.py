#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/sanitizer.py

import argparse
import re
from typing import List, Optional

from scalelab.core import config as c

_HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a CSS hex color into lowercase '#rrggbb'.

    Accepts '#rgb', '#rgba', '#rrggbb' and '#rrggbbaa' with or without the
    hash; alpha digits are dropped. Anything else yields an empty string.
    """
    if value is None:
        return ""
    s = str(value).strip().lower()
    m = _HEX_RE.match(s)
    if not m:
        return ""

    digits = m.group(1)
    if len(digits) in (3, 4):
        # e.g., 'abc' becomes 'aabbcc'
        digits = "".join(ch * 2 for ch in digits[:3])
    return "#" + digits[:6]


def _extract_signed_float(value: str) -> Optional[float]:
    """
    Extracts a floating-point number from a string, preserving the sign and
    ignoring trailing unit suffixes such as '%' or 'deg'.
    """
    if value is None:
        return None

    s = str(value).strip()
    m = re.match(r"^[+-]?(\d+(\.\d*)?|\.\d+)", s)
    if not m:
        return None

    try:
        return float(m.group(0))
    except ValueError:
        return None


def _extract_alpha_only(value: str) -> str:
    """Lowercases and keeps letters, digits, spaces, dashes and parentheses."""
    if value is None:
        return ""
    s = " ".join(str(value).split()).lower()
    return "".join(re.findall(r"[a-z0-9\-\(\) ]", s)).strip()


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_name(v: str) -> str:
    """Validator for mode, preset and background names."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid name: '{raw}'")
    return cleaned


def handle_float_any(v: str) -> float:
    val = _extract_signed_float(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")
    return val


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_int_range(min_v: int, max_v: int):
    def validator(v: str) -> int:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        return int(max(min_v, min(max_v, round(val))))
    return validator


def handle_step_list(min_v: float, max_v: float):
    """
    Factory function returning a validator for comma separated step lists
    such as '98,90,60,14'. Every entry is clamped into [min_v, max_v].
    """
    def validator(v: str) -> List[float]:
        parts = [p for p in str(v).replace(";", ",").split(",") if p.strip()]
        values = []
        for part in parts:
            val = _extract_signed_float(part)
            if val is None:
                raw = _sanitize_for_log(v)
                raise argparse.ArgumentTypeError(f"invalid step list: '{raw}'")
            values.append(max(min_v, min(max_v, val)))
        if not values:
            raise argparse.ArgumentTypeError("step list is empty")
        return values
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "name": handle_name,
    "float": handle_float_any,

    "lightness_pct": handle_float_range(0.0, 100.0),
    "chroma": handle_float_range(0.0, c.MAX_CHROMA),
    "hue_shift": handle_float_range(-c.HUE_SHIFT_MAX, c.HUE_SHIFT_MAX),
    "chroma_shift": handle_float_range(-1.0, 1.0),
    "curve_power": handle_float_range(c.CURVE_POWER_MIN, c.CURVE_POWER_MAX),
    "opacity": handle_float_range(c.OPACITY_MIN, c.OPACITY_MAX),
    "apca_lc": handle_float_range(0.0, 108.0),
    "wcag_ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),

    "lightness_steps": handle_step_list(0.0, 100.0),
    "opacity_steps": handle_step_list(c.OPACITY_MIN, c.OPACITY_MAX),
    "workers": handle_int_range(1, 64),
    "hue_steps": handle_int_range(1, 360),
}
