"""Turn any value passed to a log call into text.

Printable values (types that define their own ``__str__`` or ``__repr__``)
render through ``str()``. Everything else falls back to
``"<type-name> at 0x<hex>"`` built from the type name and ``id()``, so
rendering can never fail.

Character sequences (``bytes``, ``bytearray``, ``memoryview``, ctypes
``c_char_p``/``c_wchar_p``, pointers to and arrays of ``c_char``/``c_wchar``)
render as their content rather than as an address. Any other ctypes pointer,
``c_void_p`` included, renders as its type and the address it points at.

``render`` is a ``functools.singledispatch`` function; register a renderer
for your own type with ``@render.register``.
"""

from __future__ import annotations
import ctypes
from functools import singledispatch


def type_name(tp: type) -> str:
    module = getattr(tp, "__module__", None)
    name = getattr(tp, "__qualname__", tp.__name__)
    if module and module != "builtins":
        return f"{module}.{name}"
    return name


def opaque(value: object, address: int | None = None) -> str:
    if address is None:
        address = id(value)
    return f"{type_name(type(value))} at 0x{address:x}"


def is_printable(value: object) -> bool:
    tp = type(value)
    return tp.__str__ is not object.__str__ or tp.__repr__ is not object.__repr__


@singledispatch
def render(value: object) -> str:
    if not is_printable(value):
        return opaque(value)
    try:
        return str(value)
    except Exception:
        return opaque(value)


@render.register
def _(value: str) -> str:
    return value


@render.register(bytes)
@render.register(bytearray)
def _(value) -> str:
    return bytes(value).decode("utf-8", errors="replace")


@render.register
def _(value: memoryview) -> str:
    try:
        return value.tobytes().decode("utf-8", errors="replace")
    except ValueError:  # released buffer
        return opaque(value)


@render.register
def _(value: ctypes.c_char_p) -> str:
    raw = value.value
    if raw is None:
        return opaque(value, 0)
    return raw.decode("utf-8", errors="replace")


@render.register
def _(value: ctypes.c_wchar_p) -> str:
    text = value.value
    if text is None:
        return opaque(value, 0)
    return text


@render.register
def _(value: ctypes.c_void_p) -> str:
    return opaque(value, value.value or 0)


@render.register
def _(value: ctypes._Pointer) -> str:
    address = ctypes.cast(value, ctypes.c_void_p).value or 0
    element = type(value)._type_
    if not address or element not in (ctypes.c_char, ctypes.c_wchar):
        return opaque(value, address)
    if element is ctypes.c_wchar:
        return ctypes.wstring_at(address)
    return ctypes.string_at(address).decode("utf-8", errors="replace")


@render.register
def _(value: ctypes.Array) -> str:
    element = type(value)._type_
    if element is ctypes.c_wchar:
        return value.value
    if element is ctypes.c_char:
        return value.value.decode("utf-8", errors="replace")
    return opaque(value, ctypes.addressof(value))
