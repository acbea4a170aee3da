"""Plugin delay compensation over a routing graph of audio nodes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = ["NodeId", "RoutingGraph", "PdcEngine"]

NodeId = int


@dataclass
class RoutingGraph:
    """Audio nodes with their processing latencies and connections."""

    node_latencies: dict[NodeId, int] = field(default_factory=dict)
    connections: list[tuple[NodeId, NodeId]] = field(default_factory=list)

    def set_node_latency(self, node_id: NodeId, latency_samples: int) -> None:
        """Record the latency, in samples, introduced by a node."""
        self.node_latencies[node_id] = latency_samples

    def calculate_cumulative_latencies(self) -> dict[NodeId, int]:
        """Return the path latency of each node; connections are not followed."""
        return dict(self.node_latencies)


@dataclass
class PdcEngine:
    """Computes and applies per-node delay compensation."""

    max_latency: int = 0
    compensation_delays: dict[NodeId, int] = field(default_factory=dict)

    def calculate_compensation(self, graph: RoutingGraph) -> None:
        """Compute how much each node must be delayed to align with the slowest."""
        cumulative = graph.calculate_cumulative_latencies()
        self.max_latency = max(cumulative.values(), default=0)
        self.compensation_delays = {
            node_id: self.max_latency - latency
            for node_id, latency in cumulative.items()
        }

    def apply_compensation(self, node_id: NodeId, data: Sequence[float]) -> list[float]:
        """Return ``data`` preceded by the node's compensation in silent samples."""
        delay = self.compensation_delays.get(node_id, 0)
        return [0.0] * max(delay, 0) + list(data)