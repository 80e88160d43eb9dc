"""Root test configuration: isolate every test from local config and env"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no MD2HTML_* variables set."""
    for name in list(os.environ):
        if name.startswith("MD2HTML_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
