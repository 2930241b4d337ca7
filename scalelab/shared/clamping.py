#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    """Clamp into [0, 1]; NaN collapses to 0."""
    if v is None or math.isnan(v):
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp_range(v: float, lo: float, hi: float) -> float:
    if v is None or math.isnan(v):
        return lo
    return max(lo, min(hi, v))


def _is_finite_number(v) -> bool:
    if v is None or isinstance(v, bool):
        return False
    try:
        return math.isfinite(v)
    except TypeError:
        return False
