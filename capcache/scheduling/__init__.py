"""Node scheduling helpers."""

from capcache.scheduling.roundrobin import RoundRobin, WeightedNode

__all__ = ["RoundRobin", "WeightedNode"]
