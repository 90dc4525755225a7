from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from .attributes import AttributeSet
from .config import DIRECTED_ARROW, UNDIRECTED_ARROW
from .edge import Edge
from .statement import Statement

if TYPE_CHECKING:
    from .graph import Graph

Endpoint = Union["Node", Sequence["Node"]]


class Node(Statement):
    """Node represents a graphviz node, optionally scoped to a record port."""

    def __init__(self, name: str, parent: "Graph", port_or_attrs: Union[str, Mapping[str, Any], None] = None):
        """Declare a node in the parent graph.

        :param name: Node name.
        :param parent: Graph the node is declared in.
        :param port_or_attrs: A mapping of initial attributes, or the name of
            a record port the node reference points at.
        """
        self.name = name
        self.parent = parent
        self.port: Optional[str] = None
        self.attributes = AttributeSet()

        if isinstance(port_or_attrs, Mapping):
            self.attributes.set(port_or_attrs)
        elif port_or_attrs is not None:
            self.port = port_or_attrs

        self.parent.append(self)

    def __str__(self) -> str:
        if self.port is not None:
            return f"{self.name}:{self.port}"
        return str(self.name)

    def __repr__(self) -> str:
        return f"<Node {self}>"

    def __rshift__(self, other: Endpoint) -> Edge:
        """Implements Self >> Node and Self >> [Nodes]."""
        return self.connect_directed(other)

    def __sub__(self, other: Endpoint) -> Edge:
        """Implements Self - Node and Self - [Nodes]."""
        return self.connect_undirected(other)

    def __rrshift__(self, other: Sequence["Node"]) -> Edge:
        """Called for [Nodes] >> Self because list don't have __rshift__ operators."""
        parent = endpoint_nodes(other)[0].parent
        return Edge([other, self], parent, DIRECTED_ARROW)

    def __rsub__(self, other: Sequence["Node"]) -> Edge:
        """Called for [Nodes] - Self because list don't have __sub__ operators."""
        parent = endpoint_nodes(other)[0].parent
        return Edge([other, self], parent, UNDIRECTED_ARROW)

    def set_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> "Node":
        """Replace the node attributes. Earlier attributes are dropped."""
        self.attributes.set({**(attributes or {}), **attrs})
        return self

    def connect_directed(self, target: Endpoint) -> Edge:
        """Connect to a node or a group of nodes with a directed edge."""
        return Edge([self, target], self.parent, DIRECTED_ARROW)

    def connect_undirected(self, target: Endpoint) -> Edge:
        """Connect to a node or a group of nodes with an undirected edge."""
        return Edge([self, target], self.parent, UNDIRECTED_ARROW)

    def render(self, indent: int = 0) -> str:
        attributes = " " + self.attributes.render() if self.attributes else ""
        return f"{self._indent(indent)}{self}{attributes};\n"


def endpoint_nodes(endpoint: Any) -> List[Node]:
    """Return the nodes an edge endpoint stands for.

    :raises ValueError: if the endpoint is neither a node nor a non-empty
        list of nodes.
    """
    if isinstance(endpoint, Node):
        return [endpoint]
    if isinstance(endpoint, (list, tuple)) and endpoint and all(isinstance(n, Node) for n in endpoint):
        return list(endpoint)
    raise ValueError(f"{endpoint!r} is not a valid Node")
