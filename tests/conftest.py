import os

import pytest

os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture(autouse=True)
def _test_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
