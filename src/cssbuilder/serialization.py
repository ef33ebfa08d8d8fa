"""JSON helpers — serialize objects and restore them as typed instances.

to_json/from_json work on plain objects (dataclasses or anything with a
``__dict__``). Selectors get a dedicated dict form with a ``_type``
discriminator so their counters survive the round-trip and chaining
keeps validating after restore.

Example:
    from cssbuilder import Rectangle
    from cssbuilder.serialization import to_json, from_json

    to_json(Rectangle(10, 20))              # '{"width":10,"height":20}'
    from_json(Rectangle, '{"width":10,"height":20}').area()  # 200

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from cssbuilder.errors import SerializationError
from cssbuilder.kinds import FragmentKind
from cssbuilder.selector import Selector

T = TypeVar("T")

_SELECTOR_TYPE = "Selector"


def to_dict(selector: Selector) -> dict[str, Any]:
    """Convert a Selector to a JSON-compatible dict.

    Only kinds with a nonzero count are listed under ``counts``.

    """
    return {
        "_type": _SELECTOR_TYPE,
        "fragments": list(selector.fragments),
        "counts": {
            kind.name: selector.count(kind) for kind in FragmentKind if selector.count(kind)
        },
    }


def from_dict(data: dict[str, Any]) -> Selector:
    """Reconstruct a Selector from a dict produced by to_dict.

    Raises:
        SerializationError: If ``data`` or ``counts`` is not a dict,
            ``_type`` is wrong, keys are missing, a kind name is unknown,
            a count is not a non-negative int, a single-occurrence kind
            is counted more than once, or the counts don't add up to the
            number of fragments.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict, got {type(data).__name__}"
        raise SerializationError(msg)

    if data.get("_type") != _SELECTOR_TYPE:
        msg = f"Expected _type {_SELECTOR_TYPE!r}, got {data.get('_type')!r}"
        raise SerializationError(msg)

    try:
        fragments = data["fragments"]
        raw_counts = data["counts"]
    except KeyError as e:
        msg = f"Missing {e.args[0]!r} field in serialized selector"
        raise SerializationError(msg) from e

    if not isinstance(fragments, list) or not all(isinstance(f, str) for f in fragments):
        msg = "'fragments' must be a list of strings"
        raise SerializationError(msg)

    if not isinstance(raw_counts, dict):
        msg = f"'counts' must be a dict, got {type(raw_counts).__name__}"
        raise SerializationError(msg)

    counts: dict[FragmentKind, int] = {}
    for name, count in raw_counts.items():
        try:
            kind = FragmentKind[name]
        except KeyError as e:
            msg = f"Unknown fragment kind: {name!r}"
            raise SerializationError(msg) from e
        # bool is an int subclass
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            msg = f"Count for {name} must be a non-negative int, got {count!r}"
            raise SerializationError(msg)
        if kind.single and count > 1:
            msg = f"{kind.label} may occur at most once, got count {count}"
            raise SerializationError(msg)
        counts[kind] = count

    if sum(counts.values()) != len(fragments):
        msg = f"Counts total {sum(counts.values())} but {len(fragments)} fragments given"
        raise SerializationError(msg)

    return Selector.restore(fragments, counts)


def _encode(obj: Any) -> Any:
    """``json.dumps`` fallback for non-primitive values."""
    if isinstance(obj, Selector):
        return to_dict(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Serialize an object to a JSON string.

    Compact output (no spaces after separators) unless ``indent`` is given.
    Key order follows attribute order.

    Raises:
        TypeError: If a value can't be represented as JSON.

    """
    separators = (",", ":") if indent is None else None
    return json.dumps(obj, default=_encode, indent=indent, separators=separators)


def from_json(cls: type[T], data: str) -> T:
    """Create an instance of ``cls`` from a JSON object.

    ``cls.__init__`` is not called: the instance takes its behaviour from
    ``cls`` and its data from the JSON, one attribute per key. For
    Selector, the dict form produced by to_json is restored instead.

    Raises:
        SerializationError: If the JSON is not an object, or a key can't
            be set as an attribute of ``cls``.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)

    if cls is Selector:
        return from_dict(raw)  # type: ignore[return-value]

    obj = cls.__new__(cls)
    for key, value in raw.items():
        try:
            # object.__setattr__ also covers frozen dataclasses
            object.__setattr__(obj, key, value)
        except AttributeError as e:
            msg = f"Cannot set {key!r} on {cls.__name__}"
            raise SerializationError(msg) from e
    return obj


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
