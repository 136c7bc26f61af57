"""Deterministic JSON text for jsoncompare values.

Two encodings are provided:

- to_json_text(v): compact JSON, key order preserved. Used for rendering
  Value/ComparedValue cells; json.loads(to_json_text(v)) == v, key order
  included.
- canon(v): compact JSON with sorted keys, UTF-8 bytes. Used for
  whole-value equality when the two sides are not the same container kind.
"""
from __future__ import annotations

import json
from typing import Any

from .types import MISSING


def to_json_text(value: Any) -> str:
    """Serialize a JSON value to compact, order-preserving text."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def canon(value: Any) -> bytes:
    """Canonicalize a JSON value to bytes for deterministic comparison.

    Raises:
        ValueError: value is the MISSING marker, which has no JSON form
    """
    if value is MISSING:
        raise ValueError("MISSING has no canonical form")
    return json.dumps(
        value,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
