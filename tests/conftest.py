import os

import pytest


@pytest.fixture
def temporary_environment():
    try:
        old_env = os.environ.copy()
        yield
    finally:
        os.environ.clear()
        os.environ.update(old_env)


@pytest.fixture(autouse=True)
def no_render_limit_from_env(monkeypatch):
    # sets built in tests must not pick up a limit from the caller's shell
    monkeypatch.delenv("AASET_MAX_RENDER_ITEMS", raising=False)
