# topmark:header:start
#
#   project      : ObjKit
#   file         : serialization.py
#   file_relpath : src/objkit/serialization.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON serialization and typed deserialization.

`get_json` normalizes a value into plain JSON structures and serializes it;
`from_json` parses JSON and builds a typed value from the parsed fields through
the target's constructor or ``from_dict()`` factory.

Conventions:
- Output is compact (``{"a":1}``) unless the configuration sets ``[json].indent``.
- `get_json` never appends a trailing newline.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

from objkit.config.logging import get_logger

if TYPE_CHECKING:
    from objkit.config import Config
    from objkit.config.logging import ObjkitLogger

logger: ObjkitLogger = get_logger(__name__)

T = TypeVar("T")


def normalize_payload(obj: object) -> object:
    """Normalize a value into JSON-serializable structures.

    Conversions:
      - `Path` -> `str`
      - `Enum` -> `Enum.value`
      - object with callable `.to_dict()` -> normalize(`.to_dict()`)
      - dataclass instance -> normalize(field mapping)
      - `Mapping` -> `dict[str, normalized value]`
      - `list/tuple/set/frozenset` -> `list[normalized item]`

    Mapping keys are stringified to keep JSON object keys valid. Anything else
    is returned unchanged and left for `json.dumps` to accept or reject.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return normalize_payload(obj.value)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: normalize_payload(getattr(obj, f.name)) for f in dataclasses.fields(obj)}

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: list[Any] = list(cast("Any", obj))
        return [normalize_payload(item) for item in seq]

    return obj


def get_json(obj: object, *, config: Config | None = None) -> str:
    """Serialize ``obj`` to JSON text.

    Args:
        obj: Value to serialize; see `normalize_payload` for supported types.
        config: Optional configuration providing ``json_indent`` and ``json_sort_keys``.

    Returns:
        The JSON document (no trailing newline).

    Raises:
        TypeError: If ``obj`` contains a value JSON cannot represent.
    """
    indent: int = config.json_indent if config else 0
    sort_keys: bool = config.json_sort_keys if config else False
    normalized: object = normalize_payload(obj)
    if indent:
        return json.dumps(normalized, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    return json.dumps(normalized, separators=(",", ":"), sort_keys=sort_keys, ensure_ascii=False)


def from_json(target: type[T] | Callable[..., T], text: str | bytes) -> T:
    """Parse JSON text and build a ``target`` value from the parsed fields.

    Construction strategy:
      1. ``target.from_dict(data)`` when ``target`` provides it;
      2. ``target(**data)`` when the document is a JSON object;
      3. ``target(data)`` otherwise.

    Args:
        target: Class or factory producing the result.
        text: JSON document.

    Returns:
        The constructed value.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON (a ``ValueError``).
        TypeError: If the parsed fields do not match the target's signature.
    """
    data: Any = json.loads(text)
    from_dict: Any | None = getattr(target, "from_dict", None)
    if callable(from_dict):
        logger.trace("Building %r via from_dict()", target)
        return cast("T", from_dict(data))
    if isinstance(data, dict):
        logger.trace("Building %r from fields %s", target, list(cast("dict[str, Any]", data)))
        return target(**cast("dict[str, Any]", data))
    return target(data)
