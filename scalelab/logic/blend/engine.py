#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/blend/engine.py

import argparse

from scalelab.core import config as c
from scalelab.core.blending import (
    contrast_with_opacity,
    find_closest_opacity,
    generate_blend_matrix,
    min_opacity_for_apca,
    min_opacity_for_wcag,
)
from scalelab.logic.color.resolver import resolve_log_level
from . import renderer


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the blend command"""
    resolve_log_level(args)

    use_lut = not args.no_lut
    opacities = args.opacity_steps or c.DEFAULT_OPACITY_STEPS
    options = dict(blend_mode=args.blend_mode)

    if args.steps:
        matrix = generate_blend_matrix(args.hue, args.chroma, args.steps, opacities, args.background,
                                       use_lut=use_lut, **options)
        renderer.render_matrix(args.steps, opacities, matrix, args.background)
    else:
        row = generate_blend_matrix(args.hue, args.chroma, [args.lightness], opacities, args.background,
                                    use_lut=use_lut, **options)[0]
        contrasts = [
            contrast_with_opacity(args.lightness, args.chroma, args.hue, op, args.background,
                                  use_lut=use_lut, **options)
            for op in opacities
        ]
        renderer.render_opacity_steps(args, opacities, row, contrasts)

    if args.min_wcag is not None:
        found = min_opacity_for_wcag(args.lightness, args.chroma, args.hue, args.background, args.min_wcag,
                                     use_lut=use_lut, **options)
        renderer.render_min_opacity(f"{args.min_wcag:g}:1", found)

    if args.min_apca is not None:
        found = min_opacity_for_apca(args.lightness, args.chroma, args.hue, args.background, args.min_apca,
                                     use_lut=use_lut, **options)
        renderer.render_min_opacity(f"Lc {args.min_apca:g}", found)

    if args.match_lightness is not None:
        match = find_closest_opacity(args.match_lightness, args.lightness, args.chroma, args.hue,
                                     opacities, args.background, **options)
        renderer.render_match(args.match_lightness, match)
