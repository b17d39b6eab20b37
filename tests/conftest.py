"""Root test configuration: isolate the working directory and IDBDOC_* environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no IDBDOC_* overrides set."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("IDBDOC_"):
            monkeypatch.delenv(name)
