import argparse
import logging
import os
import sys

from . import __version__
from .attributes import Atom
from .config import DEFAULT_ENGINE, DEFAULT_FORMAT
from .graph import Graph

logger = logging.getLogger(__name__)


def run() -> int:
    """
    Run a dotdsl script and write the graph it builds.

    The script is a Python file. It runs with the root graph bound to the
    name ``graph``; the graph is named after the script file.

    Returns:
        The exit code.
    """
    parser = argparse.ArgumentParser(
        description="Run a dotdsl script and render the graph it builds.",
    )
    parser.add_argument(
        "path",
        metavar="path",
        type=str,
        help="a Python file building the graph bound to `graph`",
    )
    parser.add_argument("-o", "--output", default=None, help="output filename (default: <name>.<format>)")
    parser.add_argument("-T", "--format", default=DEFAULT_FORMAT, help=f"output format (default: {DEFAULT_FORMAT})")
    parser.add_argument("-K", "--engine", default=DEFAULT_ENGINE, help=f"layout engine (default: {DEFAULT_ENGINE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="log rendering details")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    name = os.path.splitext(os.path.basename(args.path))[0]
    graph = Graph(name, engine=args.engine)

    with open(args.path, encoding="utf-8") as f:
        code = compile(f.read(), args.path, "exec")
    logger.debug("Running %s", args.path)
    exec(code, {"__name__": "__dotdsl__", "graph": graph, "Atom": Atom})

    graph.write_to_file(args.output, args.format)
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
