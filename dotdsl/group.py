from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence

from .node import Node, endpoint_nodes
from .statement import Statement

if TYPE_CHECKING:
    from .graph import Graph


class NodeGroup(Statement):
    """NodeGroup represents nodes that share options, e.g. the same rank.

    Options keep the order they were given in and are written as plain text.
    """

    def __init__(self, nodes: Sequence[Node], parent: "Graph", options: Optional[Mapping[str, Any]] = None):
        self.nodes: List[Node] = endpoint_nodes(nodes) if nodes else []
        self.options: Dict[str, Any] = dict(options) if options else {}
        self.parent = parent

        self.parent.consume(self.nodes)
        self.parent.append(self)

    def __repr__(self) -> str:
        return f"<NodeGroup {self.options!r} {[str(n) for n in self.nodes]}>"

    def render(self, indent: int = 0) -> str:
        options = " ".join(f"{key} = {value};" for key, value in self.options.items())
        nodes = " ".join(f"{n};" for n in self.nodes)
        return f"{self._indent(indent)}{{{options} {nodes}}};\n"
