from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from . import node
from .attributes import AttributeSet
from .config import DIRECTED_ARROW, UNDIRECTED_ARROW
from .statement import Statement

if TYPE_CHECKING:
    from .graph import Graph


class Edge(Statement):
    """Edge represents a path through two or more endpoints.

    An endpoint is either a single node or a group of nodes. The arrow glyph
    and the attributes are shared by every hop of the path.
    """

    def __init__(
        self,
        endpoints: Sequence[Union["node.Node", Sequence["node.Node"]]],
        parent: "Graph",
        arrow: str = DIRECTED_ARROW,
    ):
        """Create the edge and replace the endpoint declarations with it.

        The parent graph becomes directed or undirected to match the arrow.

        :param endpoints: Nodes or lists of nodes, at least two of them.
        :param parent: Graph the edge is declared in.
        :param arrow: Arrow glyph, ``->`` or ``--``.
        """
        if len(endpoints) < 2:
            raise ValueError("An edge needs at least two endpoints")
        resolved = [node.endpoint_nodes(endpoint) for endpoint in endpoints]

        self.parent = parent
        self.arrow = arrow
        self.attributes = AttributeSet()
        self.endpoints: List[Union["node.Node", List["node.Node"]]] = []

        self.parent.mark_directed(self.directed)
        for endpoint, nodes in zip(endpoints, resolved):
            self._append(endpoint, nodes)
        self.parent.append(self)

    def __repr__(self) -> str:
        return f"<Edge {self._path()}>"

    def __rshift__(self, other: Any) -> "Edge":
        """Implements Self >> Node and Self >> [Nodes]."""
        return self.connect_directed(other)

    def __sub__(self, other: Any) -> "Edge":
        """Implements Self - Node and Self - [Nodes]."""
        return self.connect_undirected(other)

    @property
    def directed(self) -> bool:
        return self.arrow == DIRECTED_ARROW

    def extend(self, target: Any) -> "Edge":
        """Append another hop to the path.

        :param target: Next node or group of nodes.
        :return: This edge, for further chaining.
        """
        return self._extend(target, self.arrow)

    def connect_directed(self, target: Any) -> "Edge":
        return self._extend(target, DIRECTED_ARROW)

    def connect_undirected(self, target: Any) -> "Edge":
        return self._extend(target, UNDIRECTED_ARROW)

    def set_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> "Edge":
        """Replace the attributes of the whole path."""
        self.attributes.set({**(attributes or {}), **attrs})
        return self

    def render(self, indent: int = 0) -> str:
        attributes = " " + self.attributes.render() if self.attributes else ""
        return f"{self._indent(indent)}{self._path()}{attributes};\n"

    def _extend(self, target: Any, arrow: str) -> "Edge":
        nodes = node.endpoint_nodes(target)
        # One glyph for the whole path.
        self.arrow = arrow
        self.parent.mark_directed(self.directed)
        self._append(target, nodes)
        return self

    def _append(self, endpoint: Any, nodes: List["node.Node"]) -> None:
        # The endpoints are now part of this edge, so their own
        # declarations must not be rendered a second time.
        self.parent.consume(nodes)
        self.endpoints.append(endpoint if isinstance(endpoint, node.Node) else nodes)

    def _path(self) -> str:
        return f" {self.arrow} ".join(_endpoint_text(endpoint) for endpoint in self.endpoints)


def _endpoint_text(endpoint: Union["node.Node", List["node.Node"]]) -> str:
    if isinstance(endpoint, list):
        return "{" + "; ".join(str(n) for n in endpoint) + ";}"
    return str(endpoint)
