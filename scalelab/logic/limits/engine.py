#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/limits/engine.py

import argparse
from typing import List, NamedTuple

from scalelab.core import config as c
from scalelab.core.chroma_limits import (
    chroma_compensation_multiplier,
    find_max_chroma_empirically,
    max_chroma,
    suggest_optimal_chroma,
)
from scalelab.logic.color.resolver import resolve_log_level
from . import renderer


class LimitRow(NamedTuple):
    lightness: float
    table: float
    measured: float
    suggested: float


def limit_rows(hue: float, lightness_steps, gamut: str) -> List[LimitRow]:
    """Lattice lookup next to a binary-searched limit for every lightness step."""
    rows = []
    for step in lightness_steps:
        lightness = step / c.PERCENT_TO_FACTOR
        rows.append(LimitRow(
            lightness=step,
            table=max_chroma(hue, step),
            measured=find_max_chroma_empirically(hue, lightness, gamut=gamut),
            suggested=suggest_optimal_chroma(hue, lightness),
        ))
    return rows


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the limits command"""
    resolve_log_level(args)

    steps = args.steps or list(range(10, 100, 10))
    if args.all:
        hues = list(range(0, int(c.HUE_MAX), args.hue_step))
    else:
        hues = [args.hue]

    for hue in hues:
        renderer.render_limits(
            hue,
            args.gamut,
            chroma_compensation_multiplier(hue),
            limit_rows(hue, steps, args.gamut),
        )
