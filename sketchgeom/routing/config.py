"""Configuration helpers for the routing engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

from ..math_utils import DEFAULT_PRECISION


@dataclass
class RoutingConfig:
    """Tunable constants of the elbow router."""

    dongle_length: float = 40.0
    max_steps: int = 50
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


_ROUTING_CONFIG = RoutingConfig()


def get_routing_config() -> RoutingConfig:
    return copy.deepcopy(_ROUTING_CONFIG)


def set_routing_config(config: RoutingConfig) -> None:
    global _ROUTING_CONFIG
    _ROUTING_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[RoutingConfig]) -> RoutingConfig:
    return config if config is not None else _ROUTING_CONFIG


__all__ = ["RoutingConfig", "get_routing_config", "resolve_config", "set_routing_config"]
