"""Building directed graphs and rendering them in the Graphviz DOT language."""

from __future__ import annotations

import enum
from typing import Dict, Iterable, List

_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def escape_string(s: str) -> str:
    """Escape backslashes, double quotes and newlines for a DOT label."""
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def debug_quote(s: str) -> str:
    """Quote ``s`` with escapes for special and non-printable characters."""

    def escape(ch: str) -> str:
        if ch in _DEBUG_ESCAPES:
            return _DEBUG_ESCAPES[ch]
        if not ch.isprintable() and ch != " ":
            return f"\\u{{{ord(ch):x}}}"
        return ch

    return '"' + "".join(escape(ch) for ch in s) + '"'


class Attributes:
    """A set of DOT attributes, rendered as ``[key="value", ...]``."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        self._items[str(key)] = str(value)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        body = ", ".join(f"{key}={debug_quote(value)}" for key, value in self._items.items())
        return f"[{body}]"

    def __repr__(self) -> str:
        return f"Attributes({self._items!r})"


class NodeShape(enum.Enum):
    """Shape of a graph node."""

    BOX = "box"
    ELLIPSE = "ellipse"

    def __str__(self) -> str:
        return self.value


class GraphNode:
    """A node with a numeric id and its attributes."""

    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.attributes = Attributes()
        self.attributes.set("label", name)
        self.attributes.set("shape", NodeShape.BOX.value)

    def set_shape(self, shape: NodeShape) -> None:
        self.attributes.set("shape", shape.value)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes.set(key, value)

    def __str__(self) -> str:
        return f"{self.id} {self.attributes}"


class GraphEdge:
    """A directed edge between two node ids."""

    def __init__(self, src: int, dst: int, label: str) -> None:
        self.src = src
        self.dst = dst
        self.attributes = Attributes()
        self.attributes.set("label", label)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes.set(key, value)

    def __str__(self) -> str:
        return f"{self.src} -> {self.dst} {self.attributes}"


class GraphCluster:
    """A dotted subgraph grouping several nodes under a label."""

    def __init__(self, id: int, label: str, node_ids: Iterable[int]) -> None:
        self.id = id
        self.node_ids: List[int] = list(node_ids)
        self.label = escape_string(label)

    def __str__(self) -> str:
        members = "".join(f"{node_id}; " for node_id in self.node_ids)
        return (
            f"\tsubgraph cluster_{self.id} {{\n"
            f'\t\tlabel="{self.label}"\n'
            '\t\tgraph [style="dotted"]\n'
            f"\t\t{members}\n"
            "\t}\n"
        )


class Graph:
    """A directed graph of nodes, edges and clusters."""

    def __init__(self) -> None:
        self.nodes: List[GraphNode] = []
        self.edges: List[GraphEdge] = []
        self.clusters: List[GraphCluster] = []
        self.attributes = Attributes()

    def add_node(self, name: str, id: int) -> GraphNode:
        """Add a node and return it for further configuration."""
        node = GraphNode(id, name)
        self.nodes.append(node)
        return node

    def add_cluster(self, name: str, node_ids: Iterable[int]) -> GraphCluster:
        """Group ``node_ids`` into a new cluster numbered in order of creation."""
        cluster = GraphCluster(len(self.clusters), name, node_ids)
        self.clusters.append(cluster)
        return cluster

    def add_edge(self, source: int, target: int, label: str) -> GraphEdge:
        """Add an edge and return it for further configuration."""
        edge = GraphEdge(source, target, label)
        self.edges.append(edge)
        return edge

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes.set(key, value)

    def __str__(self) -> str:
        lines = ["digraph {\n", f"\tgraph {self.attributes}\n"]
        lines.extend(f"\t{node}\n" for node in self.nodes)
        lines.extend(f"\t{edge}\n" for edge in self.edges)
        lines.extend(f"{cluster}\n" for cluster in self.clusters)
        lines.append("}\n")
        return "".join(lines)