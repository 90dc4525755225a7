"""Pipe dot source through a graphviz layout command."""

import logging

import graphviz  # type: ignore[import]

from .config import DEFAULT_ENGINE, ENCODING

logger = logging.getLogger(__name__)


def render(source: str, format: str, engine: str = DEFAULT_ENGINE, encoding: str = ENCODING) -> bytes:
    """Render dot source into the given output format.

    :param source: Dot source text.
    :param format: Graphviz output format (``png``, ``svg``, ...).
    :param engine: Layout command (``dot``, ``neato``, ...).
    :param encoding: Encoding of the source handed to the command.
    :return: The command's output.
    :raises ValueError: if the format or the engine is unknown.
    :raises graphviz.ExecutableNotFound: if the layout command is missing.
    :raises graphviz.CalledProcessError: if the layout command fails.
    """
    data = source.encode(encoding)
    logger.debug("Piping %d bytes through %s -T%s", len(data), engine, format)
    output: bytes = graphviz.pipe(engine, format, data, quiet=True)
    logger.debug("Rendered %d bytes of %s", len(output), format)
    return output
