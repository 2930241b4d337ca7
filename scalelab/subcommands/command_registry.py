#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/command_registry.py

from . import (
    scale,
    blend,
    limits,
)

SUBCOMMANDS = {
    'scale': scale,
    'blend': blend,
    'limits': limits,
}
