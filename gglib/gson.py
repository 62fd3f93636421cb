"""JSON encoding and decoding with compact, deterministic output.

Mappings are written with their keys sorted, dataclasses with their fields in
declaration order, and ``<``, ``>`` and ``&`` are escaped inside strings.
Decoding can convert the parsed document into a target type such as a
dataclass, ``list[int]`` or ``dict[str, float]``.
"""

import base64
import dataclasses
import json
import math
import types
from decimal import Decimal
from typing import Any, Union, get_args, get_origin

from gglib.gvalue import zero

_NONE_TYPE = type(None)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


# ---------------------------------------------------------------- decoding


def _reject_constant(name):
    raise ValueError(f"invalid JSON literal {name!r}")


def _loads(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        text = bytes(data).decode("utf-8", errors="replace")
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    return json.loads(text, parse_constant=_reject_constant)


def valid(data) -> bool:
    """Return whether ``data`` (str or bytes) is a valid JSON document."""
    try:
        _loads(data)
    except (ValueError, TypeError, RecursionError):
        return False
    return True


def _kind(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _type_name(tp) -> str:
    return getattr(tp, "__name__", repr(tp))


def _field_hints(cls):
    # Annotations given as strings are not resolved; they decode as Any.
    return {f.name: f.type for f in dataclasses.fields(cls)}


def _json_name(field) -> str:
    return field.metadata.get("json", field.name)


def _build_dataclass(cls, obj):
    hints = _field_hints(cls)
    folded = {key.lower(): key for key in obj}
    kwargs = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        name = _json_name(field)
        hint = hints.get(field.name, Any)
        if name != "-" and name in obj:
            kwargs[field.name] = _convert(obj[name], hint)
        elif name != "-" and name.lower() in folded:
            kwargs[field.name] = _convert(obj[folded[name.lower()]], hint)
        elif (
            field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        ):
            kwargs[field.name] = _zero_of(hint)
    return cls(**kwargs)


def _zero_of(tp):
    if isinstance(tp, str):
        return None
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return None
    target = origin or tp
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        return _build_dataclass(target, {})
    return zero(target)


def _convert_union(value, args):
    if value is None and _NONE_TYPE in args:
        return None
    candidates = [a for a in args if a is not _NONE_TYPE]
    if not candidates:
        return None
    last_error = None
    for candidate in candidates:
        try:
            return _convert(value, candidate)
        except ValueError as exc:
            last_error = exc
    raise last_error


def _convert_sequence(value, target, args):
    if issubclass(target, tuple) and args and args[-1] is not Ellipsis:
        if len(args) != len(value):
            raise ValueError(
                f"cannot unmarshal array of length {len(value)} "
                f"into tuple of length {len(args)}"
            )
        return target(_convert(v, a) for v, a in zip(value, args))
    item_type = args[0] if args else Any
    return target(_convert(v, item_type) for v in value)


def _convert_key(key, key_type):
    origin = get_origin(key_type) or key_type
    if key_type is Any or key_type is object:
        return key
    if isinstance(origin, type) and issubclass(origin, int) and not issubclass(origin, bool):
        try:
            return origin(int(key))
        except ValueError:
            raise ValueError(f"cannot unmarshal key {key!r} into {_type_name(key_type)}") from None
    return _convert(key, key_type)


def _convert_mapping(value, target, args):
    key_type, value_type = args if len(args) == 2 else (Any, Any)
    return target(
        (_convert_key(k, key_type), _convert(v, value_type)) for k, v in value.items()
    )


def _convert(value, tp):
    if tp is Any or tp is object or isinstance(tp, str):
        return value
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Union or origin is types.UnionType:
        return _convert_union(value, args)
    if value is None:
        return _zero_of(tp)
    target = origin or tp
    if isinstance(target, type):
        if dataclasses.is_dataclass(target):
            if isinstance(value, dict):
                return _build_dataclass(target, value)
        elif issubclass(target, bool):
            if isinstance(value, bool):
                return value
        elif issubclass(target, int):
            if isinstance(value, int) and not isinstance(value, bool):
                return target(value)
        elif issubclass(target, float):
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return target(value)
        elif issubclass(target, str):
            if isinstance(value, str):
                return target(value)
        elif issubclass(target, (bytes, bytearray)):
            if isinstance(value, str):
                return target(base64.b64decode(value, validate=True))
        elif issubclass(target, (list, tuple, set, frozenset)):
            if isinstance(value, list):
                return _convert_sequence(value, target, args)
        elif issubclass(target, dict):
            if isinstance(value, dict):
                return _convert_mapping(value, target, args)
        elif isinstance(value, target):
            return value
    raise ValueError(
        f"cannot unmarshal {_kind(value)} into value of type {_type_name(tp)}"
    )


def unmarshal(data, typ=object):
    """Parse the JSON document ``data`` (str or bytes) into a value of ``typ``.

    Raises ValueError if the document is invalid or does not fit ``typ``.
    """
    return _convert(_loads(data), typ)


# ---------------------------------------------------------------- encoding


def _quote(s: str) -> str:
    parts = ['"']
    for ch in s:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif ch < " ":
            parts.append(f"\\u{ord(ch):04x}")
        elif "\ud800" <= ch <= "\udfff":
            parts.append("\ufffd")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _format_float(f: float) -> str:
    if math.isnan(f) or math.isinf(f):
        raise ValueError(f"unsupported value: {f!r}")
    magnitude = abs(f)
    decimal = Decimal(repr(f))
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        sign, digits, exp = decimal.as_tuple()
        digits = list(digits)
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
            exp += 1
        exponent = exp + len(digits) - 1
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        suffix = f"e-{-exponent}" if exponent < 0 else f"e+{exponent:02d}"
        return ("-" if sign else "") + mantissa + suffix
    text = format(decimal, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _map_key(key) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(int(key))
    raise TypeError(f"unsupported map key type: {type(key).__name__}")


def _wrap(opening, closing, members, indent, prefix, depth):
    if not members:
        return opening + closing
    if indent is None:
        return opening + ",".join(members) + closing
    inner = "\n" + prefix + indent * (depth + 1)
    outer = "\n" + prefix + indent * depth
    return opening + inner + ("," + inner).join(members) + outer + closing


def _encode_object(items, indent, prefix, depth):
    separator = ":" if indent is None else ": "
    members = [
        _quote(key) + separator + _encode(value, indent, prefix, depth + 1)
        for key, value in items
    ]
    return _wrap("{", "}", members, indent, prefix, depth)


def _encode_array(values, indent, prefix, depth):
    members = [_encode(value, indent, prefix, depth + 1) for value in values]
    return _wrap("[", "]", members, indent, prefix, depth)


def _encode(value, indent, prefix, depth) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(float(value))
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _quote(base64.b64encode(bytes(value)).decode("ascii"))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        items = [
            (_json_name(f), getattr(value, f.name))
            for f in dataclasses.fields(value)
            if _json_name(f) != "-"
        ]
        return _encode_object(items, indent, prefix, depth)
    if isinstance(value, dict):
        items = sorted(
            ((_map_key(k), v) for k, v in value.items()), key=lambda kv: kv[0]
        )
        return _encode_object(items, indent, prefix, depth)
    if isinstance(value, (set, frozenset)):
        return _encode_array(sorted(value), indent, prefix, depth)
    if isinstance(value, (list, tuple)):
        return _encode_array(value, indent, prefix, depth)
    raise TypeError(f"unsupported type: {type(value).__name__}")


def marshal(v) -> bytes:
    """Return the compact JSON encoding of ``v`` as UTF-8 bytes."""
    return _encode(v, None, "", 0).encode("utf-8")


def marshal_indent(v, prefix, indent) -> bytes:
    """Return the JSON encoding of ``v`` with each line indented.

    Every line after the first starts with ``prefix`` followed by one copy of
    ``indent`` per nesting level.
    """
    return _encode(v, indent, prefix, 0).encode("utf-8")


def marshal_string(v) -> str:
    """Return the compact JSON encoding of ``v`` as a string."""
    return _encode(v, None, "", 0)


def to_string(v) -> str:
    """Return the compact JSON encoding of ``v``, or "" if it cannot be encoded."""
    try:
        return marshal_string(v)
    except (TypeError, ValueError, RecursionError):
        return ""


def to_string_indent(v, prefix, indent) -> str:
    """Return the indented JSON encoding of ``v``, or "" if it cannot be encoded."""
    try:
        return _encode(v, indent, prefix, 0)
    except (TypeError, ValueError, RecursionError):
        return ""