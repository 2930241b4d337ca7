import os
import sys

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from scalelab.core import config as c  # noqa: E402
from scalelab.core.cache import GenerationCache  # noqa: E402
from scalelab.core.engine import ColorEngine  # noqa: E402
from scalelab.shared.logger import set_log_level  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_log_level():
    set_log_level(c.DEFAULT_LOG_LEVEL)
    yield
    set_log_level(c.DEFAULT_LOG_LEVEL)


@pytest.fixture
def engine():
    return ColorEngine(cache=GenerationCache())


@pytest.fixture
def srgb_engine():
    return ColorEngine(gamut=c.GAMUT_SRGB, cache=GenerationCache())
