from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List


class _Missing:
    """Absent-marker: the key or index does not exist on this side.

    Distinct from ``None``, which is an explicit JSON null.
    """

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class NodeKind(str, Enum):
    """Tag of a JSON node, plus ABSENT for a side that has no node."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    ABSENT = "absent"


SCALAR_KINDS = frozenset(
    {NodeKind.NULL, NodeKind.BOOL, NodeKind.NUMBER, NodeKind.STRING}
)


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a parsed JSON value.

    bool is checked before number since bool subclasses int.

    Raises:
        TypeError: value is not part of the JSON data model
    """
    if value is MISSING:
        return NodeKind.ABSENT
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class DifferenceRecord:
    """
    One divergence between the two documents.

    Attributes:
        field: Path of the divergent node
        value: Node from the second (right) document, or MISSING
        compared_field: Same path as ``field``
        compared_value: Node from the first (left) document, or MISSING
    """

    field: str
    value: Any
    compared_field: str
    compared_value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Field": self.field,
            "Value": self.value,
            "ComparedField": self.compared_field,
            "ComparedValue": self.compared_value,
        }

    def to_row(self, missing_text: str = "<missing>") -> List[str]:
        """Spreadsheet cells in column order, values as JSON text."""
        from .canon import to_json_text

        def cell(value: Any) -> str:
            if value is MISSING:
                return missing_text
            return to_json_text(value)

        return [
            self.field,
            cell(self.value),
            self.compared_field,
            cell(self.compared_value),
        ]
