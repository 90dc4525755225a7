import logging
from types import TracebackType
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Type, Union

import graphviz  # type: ignore[import]

from . import renderer
from .config import (
    DEFAULT_ENGINE,
    DEFAULT_FORMAT,
    DEFAULT_GRAPH_TYPE,
    DIRECTED_GRAPH_TYPE,
    DOT_FORMAT,
    EDGE_ATTRS_NODE,
    ENCODING,
    GRAPH_ATTRS_NODE,
    GRAPH_TYPES,
    NODE_ATTRS_NODE,
    SUBGRAPH_TYPE,
    UNDIRECTED_GRAPH_TYPE,
)
from .group import NodeGroup
from .node import Node
from .statement import Statement

logger = logging.getLogger(__name__)


class Graph(Statement):
    """Graph is the root of a dot document, or a subgraph nested in one.

    Every call that declares something appends a statement to
    :attr:`statements`; connecting nodes replaces their declarations with
    the edge.
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Graph"] = None,
        indent: Optional[int] = None,
        filename: str = "",
        outformat: Union[List[str], str] = DEFAULT_FORMAT,
        engine: str = DEFAULT_ENGINE,
    ):
        """Graph represents a graph description.

        :param name: Graph name. It will be used for output filename if the
            filename isn't given.
        :param parent: Enclosing graph when this graph is a subgraph.
        :param indent: Indent level of the rendered graph. Defaults to one
            level deeper than the parent.
        :param filename: The output filename, without the extension. Used
            when the graph is written on leaving a ``with`` block.
        :param outformat: Output format or list of formats. Default is 'png'.
        :param engine: Graphviz layout command. Default is 'dot'.
        """
        self.name = name
        self.parent = parent
        if indent is None:
            indent = parent.indent + 1 if parent is not None else 0
        self.indent: int = indent
        self.graph_type: str = DEFAULT_GRAPH_TYPE
        self.directed: bool = True
        self.statements: List[Statement] = []

        self.filename: str = filename or str(name)

        formats = outformat if isinstance(outformat, list) else [outformat]
        for one_format in formats:
            if not self._validate_outformat(one_format):
                raise ValueError(f'"{one_format}" is not a valid output format')
        self.outformat: Union[List[str], str] = outformat

        if not self._validate_engine(engine):
            raise ValueError(f'"{engine}" is not a valid layout engine')
        self.engine: str = engine

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Graph {self.name}>"

    def __getitem__(self, name: str) -> Node:
        return self.node(name)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __enter__(self) -> "Graph":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        # Subgraphs are already part of their parent; only the root is written.
        if exc_type is not None or self.parent is not None:
            return
        formats = self.outformat if isinstance(self.outformat, list) else [self.outformat]
        for one_format in formats:
            self.write_to_file(f"{self.filename}.{one_format}", one_format)

    def _repr_png_(self) -> bytes:
        return self.render_image("png")

    @staticmethod
    def _validate_outformat(outformat: str) -> bool:
        return outformat.lower() in graphviz.FORMATS

    @staticmethod
    def _validate_engine(engine: str) -> bool:
        return engine in graphviz.ENGINES

    def append(self, statement: Statement) -> None:
        self.statements.append(statement)

    def consume(self, nodes: Iterable[Node]) -> None:
        """Drop the pending declarations of the given nodes.

        The latest declaration of each node is removed. Nodes that have no
        pending declaration in this graph are ignored.
        """
        for n in nodes:
            for index in range(len(self.statements) - 1, -1, -1):
                if self.statements[index] is n:
                    del self.statements[index]
                    break

    def mark_directed(self, directed: bool) -> None:
        """Switch this graph, and the graphs enclosing it, to (un)directed."""
        self.directed = directed
        self.graph_type = DIRECTED_GRAPH_TYPE if directed else UNDIRECTED_GRAPH_TYPE
        if self.parent is not None:
            self.parent.mark_directed(directed)

    def set_type(self, graph_type: str) -> None:
        """Override the graph keyword, one of digraph, graph or subgraph."""
        if graph_type not in GRAPH_TYPES:
            raise ValueError(f'"{graph_type}" is not a valid graph type')
        self.graph_type = graph_type

    def node(self, name: str, port_or_attrs: Union[str, Mapping[str, Any], None] = None) -> Node:
        """Declare a node.

        :param name: Node name.
        :param port_or_attrs: Initial attributes, or a record port name.
        """
        return Node(name, self, port_or_attrs)

    def subgraph(self, name: str, builder: Optional[Callable[["Graph"], Any]] = None) -> "Graph":
        """Create a subgraph, e.g. a cluster.

        :param name: Subgraph name. Graphviz draws subgraphs whose name starts
            with ``cluster`` as a box.
        :param builder: Called with the new subgraph to populate it before it
            is added to this graph.
        :return: The subgraph.
        """
        child = Graph(name, parent=self, indent=self.indent + 1, engine=self.engine)
        if builder is not None:
            builder(child)
        self.append(child)
        return child

    def set_graph_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> Node:
        return Node(GRAPH_ATTRS_NODE, self).set_attributes(attributes, **attrs)

    def set_node_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> Node:
        return Node(NODE_ATTRS_NODE, self).set_attributes(attributes, **attrs)

    def set_edge_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> Node:
        return Node(EDGE_ATTRS_NODE, self).set_attributes(attributes, **attrs)

    def group(self, nodes: Sequence[Node], options: Optional[Mapping[str, Any]] = None) -> NodeGroup:
        """Group nodes under shared options."""
        return NodeGroup(nodes, self, options)

    def rank(self, same: Any, nodes: Sequence[Node]) -> NodeGroup:
        """Put the given nodes on the same rank."""
        return self.group(nodes, {"rank": same})

    def render(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = self.indent
        graph_type = SUBGRAPH_TYPE if self.parent is not None else self.graph_type
        body = "".join(statement.render(indent + 1) for statement in self.statements)
        return f"{self._indent(indent)}{graph_type} {self.name} {{\n{body}{self._indent(indent)}}}\n"

    def render_image(self, format: str = DEFAULT_FORMAT) -> bytes:
        """Render the graph into an image, or into dot source for 'dot'."""
        format = str(format)
        source = self.render()
        if format == DOT_FORMAT:
            return source.encode(ENCODING)
        return renderer.render(source, format, engine=self.engine)

    def write_to_file(self, filename: Optional[str] = None, format: str = DEFAULT_FORMAT) -> str:
        """Render the graph and store it.

        :param filename: Output path. Default is '<name>.<format>'.
        :param format: Output format. Default is 'png'.
        :return: The path written.
        """
        format = str(format)
        data = self.render_image(format)
        path = filename or f"{self.name}.{format}"
        with open(path, "wb") as f:
            f.write(data)
        logger.info("Wrote %s (%d bytes)", path, len(data))
        return path
