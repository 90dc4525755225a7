from typing import Any, Dict, Iterator, Mapping, Optional


class Atom(str):
    """A string that is written to the dot output bare, without quotes.

    Use it for identifiers and keywords such as ``box``, ``same`` or the
    name of a cluster, where plain strings would be quoted.
    """

    def __repr__(self) -> str:
        return f"Atom({str.__repr__(self)})"


# fmt: off
_escapes: Mapping[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\x1b": "\\e",
}
# fmt: on


def quote(text: str) -> str:
    """Quote and escape a text value.

    An ESC character (``"\\x1b"``) becomes ``\\l``, the graphviz escape for a
    left-justified line break.
    """
    escaped = "".join(_escapes.get(ch, ch) for ch in text)
    return f'"{escaped}"'.replace("\\e", "\\l")


def format_value(value: Any) -> str:
    if isinstance(value, Atom):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return quote(str(value))


class AttributeSet:
    """AttributeSet holds the attributes of a node, an edge or a graph."""

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self._attrs: Dict[str, Any] = dict(attributes) if attributes else {}

    def __len__(self) -> int:
        return len(self._attrs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._attrs)

    def __getitem__(self, key: str) -> Any:
        return self._attrs[key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeSet):
            return self._attrs == other._attrs
        if isinstance(other, Mapping):
            return self._attrs == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"AttributeSet({self._attrs!r})"

    def set(self, attributes: Optional[Mapping[str, Any]]) -> None:
        """Replace all attributes with the given ones."""
        self._attrs = dict(attributes) if attributes else {}

    def render(self) -> str:
        if not self._attrs:
            return ""
        pairs = sorted(self._attrs.items(), key=lambda item: str(item[0]))
        return "[" + ", ".join(f"{key} = {format_value(value)}" for key, value in pairs) + "]"
