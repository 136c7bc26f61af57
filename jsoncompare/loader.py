from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from .core.filters import parse_filter_text
from .errors import FilterFileError, JsonFileNotFoundError, JsonParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_json_file(path: PathLike) -> Any:
    """
    Read and parse a JSON document.

    Args:
        path: Path to a UTF-8 JSON file (a leading BOM is accepted)

    Returns:
        Parsed JSON value

    Raises:
        JsonFileNotFoundError: path does not exist
        JsonParseError: file is unreadable, not UTF-8, not valid JSON (the
            NaN/Infinity extensions included), or nested too deeply
    """
    file_path = Path(path)
    if not file_path.exists():
        raise JsonFileNotFoundError(path)

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise JsonParseError(path, str(e)) from e

    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise JsonParseError(path, str(e)) from e

    logger.debug("Loaded JSON document %s", file_path)
    return value


def read_filter_file(path: PathLike) -> List[str]:
    """
    Read the filtered-fields file: one path substring per line.

    Raises:
        FilterFileError: file is missing or unreadable
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FilterFileError(path, str(e)) from e

    patterns = parse_filter_text(text)
    logger.info("Loaded %d field filter(s) from %s", len(patterns), path)
    return patterns


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")
