"""JSON round-trip for plain values and prototype-backed objects.

:func:`from_json` attaches parsed fields to an instance of a caller-chosen
class without running its ``__init__``, so the result gains that class's
methods on top of the parsed data::

    circle = from_json(Circle, '{"radius":10}')
    circle.radius   # => 10
    circle.area()   # => 314.159...
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from object_tasks.objects.config import DEFAULT_CONFIG, SerializerConfig
from object_tasks.objects.errors import ParseError

__all__ = ["get_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_jsonable(obj: Any) -> Any:
    """Fallback for objects the json module cannot encode natively."""
    if hasattr(obj, "__dict__"):
        return vars(obj)
    # Slotted dataclasses; unset slots are skipped.
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: getattr(obj, f.name)
            for f in dataclasses.fields(obj)
            if hasattr(obj, f.name)
        }
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(value: Any, config: SerializerConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    cfg = config or DEFAULT_CONFIG
    return json.dumps(
        value,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
        default=_to_jsonable,
    )


def from_json(proto: type[T], text: str) -> T:
    """Parse *text* and expose the result through the methods of *proto*.

    Raises ParseError if *text* is not valid JSON, and also when it is valid
    JSON but not an object: only an object carries named fields to attach.
    Raises TypeError if *proto* instances cannot hold the parsed fields, as
    with a ``__slots__`` class missing one of them.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Could not parse JSON for %s: %s", proto.__name__, exc)
        raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object for {proto.__name__}, "
            f"got {type(data).__name__}"
        )

    instance = proto.__new__(proto)
    if hasattr(instance, "__dict__"):
        instance.__dict__.update(data)
        return instance
    for key, value in data.items():
        try:
            setattr(instance, key, value)
        except AttributeError as exc:
            raise TypeError(
                f"{proto.__name__} instances cannot hold field {key!r}"
            ) from exc
    return instance
