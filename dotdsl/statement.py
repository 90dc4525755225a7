from abc import ABC, abstractmethod

from .config import INDENT_UNIT


class Statement(ABC):
    """Statement is a renderable unit inside the body of a graph."""

    @abstractmethod
    def render(self, indent: int = 0) -> str:
        pass

    @staticmethod
    def _indent(indent: int) -> str:
        return INDENT_UNIT * indent
