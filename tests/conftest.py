from __future__ import annotations

import pytest

from murmurbloom import BloomFilter


@pytest.fixture
def small_filter() -> BloomFilter:
    return BloomFilter(size=64, k=3)


@pytest.fixture
def words() -> list[str]:
    return [f"word-{i}" for i in range(200)]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("MURMURBLOOM_SIZE", "MURMURBLOOM_K", "MURMURBLOOM_ENCODING", "MURMURBLOOM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
