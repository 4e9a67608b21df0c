import json
from typing import Any


def to_json(data: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """
    Convert a Python object to a JSON string.

    Sets are written as sorted lists so reports diff cleanly.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 2)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent, default=_encode_extra)


def _encode_extra(obj: Any) -> Any:
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
