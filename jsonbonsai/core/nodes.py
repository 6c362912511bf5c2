"""
Tree values produced by the jsonbonsai tree builder.

A parsed document is a tree of TreeValue nodes, one dataclass per JSON
variant. Equality is structural, so two trees built from equivalent input
compare equal. Objects keep their members as ordered (key, value) pairs:
duplicate keys are preserved in position, never merged or rejected.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional


class NodeType(Enum):
    """Tag identifying which JSON variant a TreeValue holds."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


class TreeValue:
    """Base class for every parsed JSON value."""

    node_type: ClassVar[NodeType]

    def to_python(self) -> Any:
        """Convert this tree to plain Python objects."""
        raise NotImplementedError


@dataclass
class JsonObject(TreeValue):
    """A JSON object as ordered (key, value) pairs."""

    members: list[tuple[str, TreeValue]] = field(default_factory=list)

    node_type: ClassVar[NodeType] = NodeType.OBJECT

    def __iter__(self) -> Iterator[tuple[str, TreeValue]]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> list[str]:
        """Keys in document order, duplicates included."""
        return [key for key, _ in self.members]

    def get(self, key: str) -> Optional[TreeValue]:
        """Value of the first member named key, or None."""
        for name, value in self.members:
            if name == key:
                return value
        return None

    def get_all(self, key: str) -> list[TreeValue]:
        """Values of every member named key, in document order."""
        return [value for name, value in self.members if name == key]

    def to_python(self) -> dict[str, Any]:
        # Later duplicates overwrite earlier ones, as json.loads does
        return {key: value.to_python() for key, value in self.members}


@dataclass
class JsonArray(TreeValue):
    """A JSON array."""

    items: list[TreeValue] = field(default_factory=list)

    node_type: ClassVar[NodeType] = NodeType.ARRAY

    def __iter__(self) -> Iterator[TreeValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> TreeValue:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JsonString(TreeValue):
    """A string leaf; the text is kept exactly as written between the quotes."""

    value: str

    node_type: ClassVar[NodeType] = NodeType.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonNumber(TreeValue):
    """A number leaf, always held as a float."""

    value: float

    node_type: ClassVar[NodeType] = NodeType.NUMBER

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class JsonTrue(TreeValue):
    node_type: ClassVar[NodeType] = NodeType.TRUE

    def to_python(self) -> bool:
        return True


@dataclass(frozen=True)
class JsonFalse(TreeValue):
    node_type: ClassVar[NodeType] = NodeType.FALSE

    def to_python(self) -> bool:
        return False


@dataclass(frozen=True)
class JsonNull(TreeValue):
    node_type: ClassVar[NodeType] = NodeType.NULL

    def to_python(self) -> None:
        return None
