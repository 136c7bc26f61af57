"""Positional JSON diff for jsoncompare.

Walks two parsed JSON values in lock-step and reports every path where
they diverge.

Rules:
- A path matched by the filter is skipped along with everything below it
- object vs object: union of keys (left order, then right-only keys)
- array vs array: by index up to the longer length, no realignment
- Anything else: compared as a whole, one record if unequal
- A side with no key/index is MISSING, never None
- int vs float compare as numbers; bool never equals a number

Paths:
    key            object member at the root
    parent.key     object member below the root
    parent[i]      array element
    ""             the root itself
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Union

from .canon import canon
from .filters import FieldFilter
from .types import MISSING, SCALAR_KINDS, DifferenceRecord, NodeKind, classify

logger = logging.getLogger(__name__)


def json_diff(
    left: Any,
    right: Any,
    filters: Union[FieldFilter, Iterable[str]] = (),
) -> List[DifferenceRecord]:
    """Compare two JSON values and return the differing paths.

    Args:
        left: Value from the first document (reported as ComparedValue)
        right: Value from the second document (reported as Value)
        filters: FieldFilter or path substrings to suppress

    Returns:
        Difference records in traversal order.
    """
    if not isinstance(filters, FieldFilter):
        filters = FieldFilter(filters)
    records = _diff_node(left, right, "", filters)
    logger.debug("json_diff found %d difference(s)", len(records))
    return records


def values_equal(left: Any, right: Any) -> bool:
    """Leaf equality: strict for scalars, canonical text otherwise."""
    left_kind = classify(left)
    right_kind = classify(right)
    if left_kind in SCALAR_KINDS and right_kind in SCALAR_KINDS:
        return left_kind is right_kind and left == right
    if left_kind is NodeKind.ABSENT or right_kind is NodeKind.ABSENT:
        return left_kind is right_kind
    return canon(left) == canon(right)


def _diff_node(
    left: Any, right: Any, path: str, filters: FieldFilter
) -> List[DifferenceRecord]:
    records: List[DifferenceRecord] = []

    if filters.matches(path):
        return records

    left_kind = classify(left)
    right_kind = classify(right)

    if left_kind is NodeKind.OBJECT and right_kind is NodeKind.OBJECT:
        for key in dict.fromkeys([*left, *right]):
            child = f"{path}.{key}" if path else str(key)
            records.extend(
                _diff_node(
                    left.get(key, MISSING), right.get(key, MISSING), child, filters
                )
            )
        return records

    if left_kind is NodeKind.ARRAY and right_kind is NodeKind.ARRAY:
        for i in range(max(len(left), len(right))):
            records.extend(
                _diff_node(_item(left, i), _item(right, i), f"{path}[{i}]", filters)
            )
        return records

    if not values_equal(left, right):
        records.append(
            DifferenceRecord(
                field=path,
                value=right,
                compared_field=path,
                compared_value=left,
            )
        )
    return records


def _item(seq: Any, i: int) -> Any:
    return seq[i] if i < len(seq) else MISSING
