"""
Value Rendering
===============

Converts any loggable value to the text of a record.

    render(None)                  -> "null"
    render(True)                  -> "true"
    render([1, 2, 3])             -> "int[] {1, 2, 3}"
    render(array("d", []))        -> "double[] {}"
    render(ValueError("boom"))    -> "ValueError: boom" + one "\tat ..." line per frame
"""

from array import array
from functools import singledispatch
import traceback
from typing import Any, Iterable

# array.array typecodes and the tag shown in front of the braces
TYPECODE_NAMES = {
    "b": "byte",
    "B": "byte",
    "h": "short",
    "H": "short",
    "i": "int",
    "I": "int",
    "l": "long",
    "L": "long",
    "q": "long",
    "Q": "long",
    "f": "float",
    "d": "double",
    "u": "char",
    "w": "char",
}
DEFAULT_TYPE_NAME = "object"


def render_sequence(type_name: str, items: Iterable[Any]) -> str:
    """Render items as "TypeName[] {a, b, c}"."""
    body = ", ".join(render(item) for item in items)
    return f"{type_name}[] {{{body}}}"


def infer_type_name(items: list[Any] | tuple[Any, ...]) -> str:
    """Common element type name, or "object" when empty or mixed."""
    kinds = {type(item) for item in items}
    if len(kinds) != 1:
        return DEFAULT_TYPE_NAME
    return kinds.pop().__name__


@singledispatch
def render(value: Any, type_name: str | None = None) -> str:
    """
    Convert a value to display text.

    Args:
        value: Any object
        type_name: Tag to use for sequences instead of the inferred one

    Returns:
        Display text; may contain line breaks (exceptions, multi-line str())
    """
    return str(value)


@render.register(type(None))
def _render_none(value: None, type_name: str | None = None) -> str:
    return "null"


@render.register(bool)
def _render_bool(value: bool, type_name: str | None = None) -> str:
    return "true" if value else "false"


@render.register(str)
def _render_str(value: str, type_name: str | None = None) -> str:
    return value


@render.register(list)
@render.register(tuple)
def _render_list(value: list[Any] | tuple[Any, ...], type_name: str | None = None) -> str:
    return render_sequence(type_name or infer_type_name(value), value)


@render.register(array)
def _render_array(value: array, type_name: str | None = None) -> str:
    tag = type_name or TYPECODE_NAMES.get(value.typecode, DEFAULT_TYPE_NAME)
    return render_sequence(tag, value)


@render.register(bytes)
@render.register(bytearray)
def _render_bytes(value: bytes | bytearray, type_name: str | None = None) -> str:
    return render_sequence(type_name or "byte", value)


@render.register(BaseException)
def _render_exception(value: BaseException, type_name: str | None = None) -> str:
    kind = type(value)
    name = kind.__qualname__
    if kind.__module__ not in ("builtins", "__main__"):
        name = f"{kind.__module__}.{name}"
    message = str(value)
    lines = [f"{name}: {message}" if message else name]
    for frame in traceback.extract_tb(value.__traceback__):
        lines.append(f"\tat {frame.name} ({frame.filename}:{frame.lineno})")
    return "\n".join(lines)
