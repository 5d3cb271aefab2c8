from __future__ import annotations

import os

import pytest

from link_verdict.policy.lists import HeuristicLists


@pytest.fixture(autouse=True)
def clean_link_verdict_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("LINK_VERDICT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_lists() -> HeuristicLists:
    return HeuristicLists()
