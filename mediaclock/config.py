"""
Runtime configuration.

Settings are read from the process environment once and cached:

- `MEDIACLOCK_RESCALE_STRATEGY`: `decompose` (default) or `wide128`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .kernels.python.mul_div64_v1 import RescaleStrategy

logger = logging.getLogger(__name__)

STRATEGY_ENV = "MEDIACLOCK_RESCALE_STRATEGY"
DEFAULT_STRATEGY = RescaleStrategy.DECOMPOSE


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _parse_strategy(value: str) -> RescaleStrategy:
    try:
        return RescaleStrategy(value.strip().lower())
    except ValueError:
        logger.warning(
            "ignoring unknown %s=%r; using %s", STRATEGY_ENV, value, DEFAULT_STRATEGY.value
        )
        return DEFAULT_STRATEGY


@dataclass(frozen=True)
class RescaleConfig:
    strategy: RescaleStrategy = DEFAULT_STRATEGY

    @classmethod
    def from_env(cls) -> "RescaleConfig":
        strategy = _parse_strategy(_env_str(STRATEGY_ENV, DEFAULT_STRATEGY.value))
        logger.debug("rescale strategy resolved to %s", strategy.value)
        return cls(strategy=strategy)


@lru_cache(maxsize=1)
def default_config() -> RescaleConfig:
    return RescaleConfig.from_env()


def reset_default_config() -> None:
    """Drop the cached config so the next lookup re-reads the environment."""
    default_config.cache_clear()
