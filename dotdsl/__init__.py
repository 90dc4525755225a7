"""Build graphviz dot documents with plain Python calls.

    >>> from dotdsl import Graph
    >>> g = Graph("sample")
    >>> g.node("alpha") >> g.node("beta") >> g.node("gamma")
    <Edge alpha -> beta -> gamma>
    >>> print(g, end="")
    digraph sample {
      alpha -> beta -> gamma;
    }
"""

from .attributes import Atom, AttributeSet
from .graph import Graph
from .node import Node
from .edge import Edge
from .group import NodeGroup

__version__ = "0.1.0"
