#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/shared/truecolor.py

import os
import re
import sys

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if not colors_enabled():
        return
    if os.environ.get("COLORTERM") not in ("truecolor", "24bit"):
        os.environ["COLORTERM"] = "truecolor"


def colors_enabled() -> bool:
    """False when the user opted out of styled output with NO_COLOR."""
    return not os.environ.get("NO_COLOR")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub('', text)


def emit(text: str = "", end: str = "\n", file=None) -> None:
    """print() that drops every ANSI sequence when colors are disabled."""
    if not colors_enabled():
        text = strip_ansi(text)
    print(text, end=end, file=file or sys.stdout)


def swatches_enabled(stream=None) -> bool:
    """True when 24-bit background swatches should be drawn on `stream`."""
    if not colors_enabled():
        return False
    stream = stream or sys.stdout
    return os.environ.get("COLORTERM") in ("truecolor", "24bit") or bool(
        getattr(stream, "isatty", lambda: False)()
    )
