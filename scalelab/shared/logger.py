#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/logger.py

import sys
import argparse

from scalelab.core import config as c
from scalelab.shared.truecolor import emit

_threshold = c.LOG_LEVELS[c.DEFAULT_LOG_LEVEL]


def set_log_level(level: str) -> None:
    """Drop every message ranked below `level`."""
    global _threshold
    level = str(level).lower()
    if level not in c.LOG_LEVELS:
        raise ValueError(f"unknown log level: '{level}'")
    _threshold = c.LOG_LEVELS[level]


def get_log_level() -> str:
    for name, rank in c.LOG_LEVELS.items():
        if rank == _threshold:
            return name
    return c.DEFAULT_LOG_LEVEL


def log(level: str, message: str) -> None:
    level = str(level).lower()
    if c.LOG_LEVELS.get(level, c.LOG_LEVELS["error"]) < _threshold:
        return
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    emit(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ScalelabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
