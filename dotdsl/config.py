# fmt: off

#########################
#        Output         #
#########################

INDENT_UNIT = "  "

ENCODING = "utf-8"

DOT_FORMAT = "dot"
DEFAULT_FORMAT = "png"
DEFAULT_ENGINE = "dot"

#########################
#        Graphs         #
#########################

GRAPH_TYPES = ("digraph", "graph", "subgraph")
DEFAULT_GRAPH_TYPE = "digraph"
DIRECTED_GRAPH_TYPE = "digraph"
UNDIRECTED_GRAPH_TYPE = "graph"
SUBGRAPH_TYPE = "subgraph"

#########################
#        Edges          #
#########################

DIRECTED_ARROW = "->"
UNDIRECTED_ARROW = "--"

# Pseudo-node names that set defaults for the enclosing graph.
GRAPH_ATTRS_NODE = "graph"
NODE_ATTRS_NODE = "node"
EDGE_ATTRS_NODE = "edge"

# fmt: on
