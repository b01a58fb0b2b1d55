import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (app, fireworks)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless mode
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from fireworks.rng_service import RNGService  # noqa: E402


@pytest.fixture
def rng():
    return RNGService(1234)
