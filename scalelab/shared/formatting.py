#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/formatting.py

from scalelab.shared.clamping import _clamp01


def format_colorspace(fmt: str, *args) -> str:
    """CSS string for one of the color spaces a generated color is reported in."""
    if fmt == 'oklch':
        l, c, h = args
        return f"oklch({l * 100:.1f}% {c:.4f} {h:.1f})"
    elif fmt == 'p3':
        r, g, b = args
        return f"color(display-p3 {r:.3f} {g:.3f} {b:.3f})"
    elif fmt == 'rgb':
        r, g, b = (int(round(_clamp01(v) * 255)) for v in args)
        return f"rgb({r}, {g}, {b})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.1f}, {s * 100:.1f}%, {l * 100:.1f}%)"
    elif fmt == 'lc':
        return f"Lc {args[0]:.1f}"
    elif fmt == 'ratio':
        return f"{args[0]:.2f}:1"

    return ""


def format_oklch(l: float, c: float, h: float) -> str:
    return format_colorspace('oklch', l, c, h)


def format_display_p3(r: float, g: float, b: float) -> str:
    return format_colorspace('p3', r, g, b)


def format_rgb(r: float, g: float, b: float) -> str:
    return format_colorspace('rgb', r, g, b)


def format_hsl(h: float, s: float, l: float) -> str:
    return format_colorspace('hsl', h, s, l)
