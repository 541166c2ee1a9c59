import os

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AIOHTTP_STUBGEN_* variables of the host out of the options."""
    for name in list(os.environ):
        if name.startswith('AIOHTTP_STUBGEN_'):
            monkeypatch.delenv(name)
