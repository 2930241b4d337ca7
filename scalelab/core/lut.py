#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/lut.py

import threading
from typing import List, Optional

from . import config as c
from .conversions import linear_to_srgb, srgb_to_linear


class GammaLUT:
    """
    Interpolated lookup tables for the sRGB transfer curve in both directions.

    Inputs are clamped to [0, 1]. `precise_*` bypass the tables.
    """

    def __init__(self, precision: int = c.LUT_PRECISION):
        if precision < 2:
            raise ValueError(f"LUT precision must be at least 2, got {precision}")
        self.precision = precision
        last = precision - 1
        self._to_linear: List[float] = [srgb_to_linear(i / last) for i in range(precision)]
        self._to_srgb: List[float] = [linear_to_srgb(i / last) for i in range(precision)]

    def _lookup(self, table: List[float], v: float) -> float:
        v = max(0.0, min(1.0, v))
        index = v * (self.precision - 1)
        lo = int(index)
        hi = min(lo + 1, self.precision - 1)
        frac = index - lo
        return table[lo] * (1 - frac) + table[hi] * frac

    def srgb_to_linear(self, v: float) -> float:
        return self._lookup(self._to_linear, v)

    def linear_to_srgb(self, v: float) -> float:
        return self._lookup(self._to_srgb, v)

    @staticmethod
    def precise_srgb_to_linear(v: float) -> float:
        return srgb_to_linear(v)

    @staticmethod
    def precise_linear_to_srgb(v: float) -> float:
        return linear_to_srgb(v)


_default_lut: Optional[GammaLUT] = None
_default_lock = threading.Lock()


def default_lut() -> GammaLUT:
    """Shared table, built on first use."""
    global _default_lut
    if _default_lut is None:
        with _default_lock:
            if _default_lut is None:
                _default_lut = GammaLUT()
    return _default_lut
