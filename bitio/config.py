"""Centralized configuration for the bit codec.

Defines immutable defaults for field widths, Rice frame layout, dump
rendering and logging so that every component agrees on the same limits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Bit packing
    BITS_PER_BYTE: int = 8
    MAX_BINARY_BITS: int = 32
    MAX_RICE_PARAMETER: int = 31

    # Rice frames
    DEFAULT_RICE_PARAMETER: int = 4
    FRAME_COUNT_BITS: int = 32
    FRAME_PARAMETER_BITS: int = 5

    # Dump rendering
    DEFAULT_DUMP_LIMIT: int = 64
    DEFAULT_DUMP_WIDTH: int = 8

    # Logging
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Convenience re-exports and constants
INT32_MIN: int = -(1 << 31)
INT32_MAX: int = (1 << 31) - 1
UINT32_MASK: int = 0xFFFFFFFF
BYTE_MASK: int = 0xFF


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
