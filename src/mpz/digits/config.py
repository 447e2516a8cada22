"""Runtime configuration for the `digits` kernel.

`KernelConfig` only tunes choices the caller contract leaves open (radix,
char decoding policy, multiply strategy). It never changes the result of an
arithmetic operation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .types import RADIX, check_radix

logger = logging.getLogger(__name__)

MAX_RADIX: int = 1 << 16


@dataclass(frozen=True)
class KernelConfig:
    """Kernel knobs. Defaults reproduce the reference decimal kernel."""

    radix: int = RADIX
    strict_chars: bool = False
    multiply_strategy: str = "grade_school"
    fast_multiply_strategy: str = "karatsuba"
    # 0 disables the switch to `fast_multiply_strategy`.
    fast_multiply_threshold: int = 0

    def __post_init__(self) -> None:
        check_radix(self.radix)
        if self.fast_multiply_threshold < 0:
            raise ValueError("fast_multiply_threshold must be non-negative")


DEFAULT_CONFIG = KernelConfig()


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        logger.debug("ignoring non-integer %s=%r", name, raw)
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    logger.debug("ignoring non-boolean %s=%r", name, raw)
    return default


def config_from_env() -> KernelConfig:
    """Build a `KernelConfig` from `MPZ_DIGITS_*` environment variables."""
    cfg = KernelConfig(
        radix=_env_int("MPZ_DIGITS_RADIX", DEFAULT_CONFIG.radix, lo=2, hi=MAX_RADIX),
        strict_chars=_env_bool("MPZ_DIGITS_STRICT_CHARS", DEFAULT_CONFIG.strict_chars),
        multiply_strategy=_env_str("MPZ_DIGITS_MULTIPLY_STRATEGY", DEFAULT_CONFIG.multiply_strategy),
        fast_multiply_strategy=_env_str(
            "MPZ_DIGITS_FAST_MULTIPLY_STRATEGY", DEFAULT_CONFIG.fast_multiply_strategy
        ),
        fast_multiply_threshold=_env_int(
            "MPZ_DIGITS_FAST_MULTIPLY_THRESHOLD",
            DEFAULT_CONFIG.fast_multiply_threshold,
            lo=0,
            hi=1 << 30,
        ),
    )
    logger.debug("loaded %r", cfg)
    return cfg
