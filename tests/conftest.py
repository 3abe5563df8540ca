import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from refboard.drag import DragEngine
from refboard.store import CardStore


@pytest.fixture
def store():
    return CardStore()


@pytest.fixture
def engine(store):
    return DragEngine(store)
