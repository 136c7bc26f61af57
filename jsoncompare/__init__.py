from .core import (
    MISSING,
    # Core types
    DifferenceRecord,
    # Filtering
    FieldFilter,
    NodeKind,
    # Canonicalization
    canon,
    classify,
    # Diff
    json_diff,
    parse_filter_text,
    to_json_text,
    values_equal,
)
from .errors import (
    ExportError,
    FilterFileError,
    InputError,
    JsonCompareError,
    JsonFileNotFoundError,
    JsonParseError,
)
from .export import (
    HEADERS,
    ExportOptions,
    build_workbook,
    create_default_options,
    output_path_for,
    write_workbook,
)
from .loader import read_filter_file, read_json_file
from .version import JSONCOMPARE_VERSION

__all__ = [
    # Version
    "JSONCOMPARE_VERSION",
    # Core types
    "DifferenceRecord",
    "NodeKind",
    "MISSING",
    "classify",
    # Canonicalization
    "canon",
    "to_json_text",
    # Filtering
    "FieldFilter",
    "parse_filter_text",
    # Diff
    "json_diff",
    "values_equal",
    # Loading
    "read_json_file",
    "read_filter_file",
    # Export
    "HEADERS",
    "ExportOptions",
    "create_default_options",
    "build_workbook",
    "output_path_for",
    "write_workbook",
    # Exceptions
    "JsonCompareError",
    "InputError",
    "JsonFileNotFoundError",
    "JsonParseError",
    "FilterFileError",
    "ExportError",
]
