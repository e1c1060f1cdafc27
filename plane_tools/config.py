"""Configuration helpers for the planar sweep."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .graph import DEFAULT_CONNECTIONS_PER_VERTEX


@dataclass
class PlanarizeConfig:
    """Options for :func:`plane_tools.planarize.into_no_intersect`."""

    # reject NaN coordinates before copying the graph; otherwise they are
    # rejected as the sweep queues them
    check_finite: bool = True
    edge_capacity_hint: int = DEFAULT_CONNECTIONS_PER_VERTEX


_PLANARIZE_CONFIG = PlanarizeConfig()


def get_planarize_config() -> PlanarizeConfig:
    return copy.deepcopy(_PLANARIZE_CONFIG)


def set_planarize_config(config: PlanarizeConfig) -> None:
    global _PLANARIZE_CONFIG
    _PLANARIZE_CONFIG = copy.deepcopy(config)


__all__ = ["PlanarizeConfig", "get_planarize_config", "set_planarize_config"]
