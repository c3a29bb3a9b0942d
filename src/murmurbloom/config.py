"""murmurbloom configuration."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

from murmurbloom.bloom import optimal_k, size_for
from murmurbloom.encoding import Encoder, default_encoder, text_encoder


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, default))


class FilterConfig(BaseModel):
    size: int = Field(default_factory=lambda: _env_int("MURMURBLOOM_SIZE", 1024), ge=1)
    k: int = Field(default_factory=lambda: _env_int("MURMURBLOOM_K", 3), ge=1)
    text_encoding: str = Field(
        default_factory=lambda: os.environ.get("MURMURBLOOM_ENCODING", "utf-8")
    )
    # str(item) hashing; only for item types whose str() is stable across processes
    stringify: bool = False
    log_level: str = Field(default_factory=lambda: os.environ.get("MURMURBLOOM_LOG_LEVEL", "WARNING"))

    @classmethod
    def for_capacity(cls, n_items: int, fp_rate: float = 0.01, **kwargs) -> "FilterConfig":
        """Config sized for n_items at the target false-positive rate."""
        size = size_for(n_items, fp_rate)
        return cls(size=size, k=optimal_k(size, n_items), **kwargs)

    def encoder(self) -> Encoder:
        if self.stringify:
            return text_encoder(self.text_encoding)
        return default_encoder


def configure_logging(level: str | int = "WARNING") -> None:
    """Root logging setup for scripts; the library itself never adds handlers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
