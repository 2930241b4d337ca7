#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/chroma_limits.py

from typing import Dict, List, Tuple

from . import config as c
from .conversions import normalize_hue
from .gamut import in_gamut

# Maximum Display P3 chroma per hue (rows) and lightness percent (columns).
# Black and white carry no chroma, so the 0 and 100 columns stay at zero.
_LIGHTNESS_BUCKETS = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100)

_CHROMA_ROWS = {
    0:   (0.0, 0.05, 0.12, 0.18, 0.22, 0.24, 0.23, 0.20, 0.15, 0.08, 0.0),   # red
    30:  (0.0, 0.05, 0.12, 0.17, 0.20, 0.22, 0.21, 0.18, 0.13, 0.07, 0.0),   # orange
    60:  (0.0, 0.04, 0.10, 0.14, 0.16, 0.18, 0.19, 0.20, 0.18, 0.10, 0.0),   # yellow
    90:  (0.0, 0.05, 0.12, 0.18, 0.22, 0.25, 0.26, 0.24, 0.18, 0.10, 0.0),   # yellow-green
    120: (0.0, 0.06, 0.14, 0.20, 0.24, 0.27, 0.28, 0.26, 0.20, 0.11, 0.0),   # green
    150: (0.0, 0.06, 0.14, 0.21, 0.26, 0.29, 0.30, 0.28, 0.22, 0.12, 0.0),   # cyan-green
    180: (0.0, 0.06, 0.15, 0.22, 0.27, 0.30, 0.32, 0.30, 0.24, 0.13, 0.0),   # cyan
    210: (0.0, 0.07, 0.16, 0.24, 0.30, 0.34, 0.35, 0.32, 0.26, 0.14, 0.0),   # blue-cyan
    240: (0.0, 0.07, 0.17, 0.26, 0.32, 0.36, 0.37, 0.34, 0.28, 0.15, 0.0),   # blue
    270: (0.0, 0.06, 0.15, 0.23, 0.28, 0.31, 0.32, 0.29, 0.23, 0.13, 0.0),   # blue-magenta
    300: (0.0, 0.06, 0.14, 0.21, 0.26, 0.28, 0.28, 0.25, 0.20, 0.11, 0.0),   # magenta
    330: (0.0, 0.05, 0.13, 0.19, 0.23, 0.26, 0.25, 0.22, 0.17, 0.09, 0.0),   # red-magenta
}

HUE_CHROMA_MAP: Dict[int, Dict[int, float]] = {
    hue: dict(zip(_LIGHTNESS_BUCKETS, row)) for hue, row in _CHROMA_ROWS.items()
}


def max_chroma(hue: float, lightness_pct: float) -> float:
    """
    Bilinear lookup of the maximum chroma at `hue` degrees and `lightness_pct`
    (0-100). Hue wraps from 330 back to 0.
    """
    hue = normalize_hue(hue)
    lightness_pct = max(0.0, min(100.0, lightness_pct))

    hue_lower = int(hue // c.CHROMA_HUE_STEP) * c.CHROMA_HUE_STEP
    hue_upper = (hue_lower + c.CHROMA_HUE_STEP) % int(c.HUE_MAX)
    hue_t = (hue - hue_lower) / c.CHROMA_HUE_STEP

    l_lower = min(100 - c.CHROMA_LIGHTNESS_STEP, int(lightness_pct // c.CHROMA_LIGHTNESS_STEP) * c.CHROMA_LIGHTNESS_STEP)
    l_upper = l_lower + c.CHROMA_LIGHTNESS_STEP
    l_t = (lightness_pct - l_lower) / c.CHROMA_LIGHTNESS_STEP

    row_lo = HUE_CHROMA_MAP[hue_lower]
    row_hi = HUE_CHROMA_MAP[hue_upper]

    chroma_lo = row_lo[l_lower] * (1 - l_t) + row_lo[l_upper] * l_t
    chroma_hi = row_hi[l_lower] * (1 - l_t) + row_hi[l_upper] * l_t
    return chroma_lo * (1 - hue_t) + chroma_hi * hue_t


def chroma_compensation_multiplier(hue: float, lightness: float = c.CHROMA_REFERENCE_LIGHTNESS) -> float:
    """
    Ratio of the hue's chroma headroom to blue's at the same lightness (0-1),
    clamped to [0.5, 1.0]. Blues keep the full request, yellows about half.
    """
    lightness_pct = lightness * c.PERCENT_TO_FACTOR
    reference = max_chroma(c.CHROMA_REFERENCE_HUE, lightness_pct)
    if reference <= 0:
        return c.COMPENSATION_MAX
    ratio = max_chroma(hue, lightness_pct) / reference
    return max(c.COMPENSATION_MIN, min(c.COMPENSATION_MAX, ratio))


def chroma_scale_factor(hue: float) -> float:
    """Unclamped headroom ratio against blue at the reference lightness."""
    ref_pct = c.CHROMA_REFERENCE_LIGHTNESS * c.PERCENT_TO_FACTOR
    return max_chroma(hue, ref_pct) / max_chroma(c.CHROMA_REFERENCE_HUE, ref_pct)


def constrain_chroma_to_gamut(chroma: float, hue: float, lightness_pct: float) -> float:
    return min(chroma, max_chroma(hue, lightness_pct))


def apply_chroma_compensation(
    lightness: float,
    chroma: float,
    hue: float,
    strength: float = c.COMPENSATION_STRENGTH,
) -> Tuple[float, float, float]:
    """Pull chroma that exceeds the table limit toward it; never past it."""
    limit = max_chroma(hue, lightness * c.PERCENT_TO_FACTOR)
    if chroma <= limit:
        return (lightness, chroma, hue)
    compensated = chroma * (1 - strength) + limit * strength
    return (lightness, min(compensated, limit), hue)


def suggest_optimal_chroma(hue: float, lightness: float, margin: float = c.OPTIMAL_CHROMA_MARGIN) -> float:
    return max_chroma(hue, lightness * c.PERCENT_TO_FACTOR) * margin


def max_viable_chroma(lightness: float) -> float:
    """Coarse chroma ceiling by lightness alone."""
    if lightness > 0.95:
        return 0.08
    if lightness > 0.90:
        return 0.12
    if lightness > 0.80:
        return 0.18
    if lightness > 0.20:
        return 0.25
    if lightness > 0.10:
        return 0.20
    return 0.15


def chroma_limit_data(hue_steps: int = 36, lightness_steps: int = 10) -> List[Dict[str, float]]:
    """Sample the lattice over every hue and L 10-90 for plotting."""
    data = []
    for i in range(hue_steps):
        hue = i * c.HUE_MAX / hue_steps
        for j in range(lightness_steps):
            if lightness_steps > 1:
                lightness_pct = 10 + j * 80 / (lightness_steps - 1)
            else:
                lightness_pct = 10.0
            data.append({
                "hue": hue,
                "lightness": lightness_pct,
                "max_chroma": max_chroma(hue, lightness_pct),
            })
    return data


def find_max_chroma_empirically(
    hue: float,
    lightness: float,
    precision: float = c.EMPIRICAL_PRECISION,
    gamut: str = c.DEFAULT_GAMUT,
) -> float:
    """
    Binary search the largest in-gamut chroma at (lightness, hue).

    Used to validate or regenerate the lattice, never on the generation path.
    """
    low, high = 0.0, c.MAX_CHROMA
    best = 0.0
    precision = max(precision, c.EPS)
    while high - low > precision:
        mid = (low + high) / c.DIV_2
        if in_gamut(lightness, mid, hue, gamut):
            best = mid
            low = mid
        else:
            high = mid
    return best


def lattice_deviation(gamut: str = c.DEFAULT_GAMUT) -> List[Tuple[int, int, float, float]]:
    """(hue, lightness%, table, measured) for every interior cell of the lattice."""
    rows = []
    for hue, row in HUE_CHROMA_MAP.items():
        for lightness_pct, table_value in row.items():
            if lightness_pct in (0, 100):
                continue
            measured = find_max_chroma_empirically(hue, lightness_pct / c.PERCENT_TO_FACTOR, gamut=gamut)
            rows.append((hue, lightness_pct, table_value, measured))
    return rows
