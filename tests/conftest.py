"""Root conftest — shared fixtures."""

import pytest

from arrayprocessor import LoopArrayProcessor


@pytest.fixture
def processor():
    return LoopArrayProcessor()
