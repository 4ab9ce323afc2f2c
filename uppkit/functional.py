"""Callable wrappers that can be split into a plain function and its userdata."""

from __future__ import annotations

import copy
from typing import Any, Callable

_CO_VARARGS = 0x04


def _code_of(func: Any) -> tuple[Any, Any, int]:
    """The code object behind ``func``, its function, and how many leading
    parameters are already bound."""
    if not callable(func):
        raise TypeError(f"{func!r} is not callable")
    if isinstance(func, type):
        raise TypeError(f"cannot determine the prototype of {func!r}")
    target = func
    skip = 0
    if getattr(target, "__func__", None) is not None:
        target = target.__func__
        skip = 1
    elif getattr(target, "__code__", None) is None:
        call = getattr(type(target), "__call__", None)
        target = getattr(call, "__func__", call)
        skip = 1
    code = getattr(target, "__code__", None)
    if code is None:
        raise TypeError(f"cannot determine the prototype of {func!r}")
    return code, target, skip


def arity_of(func: Any) -> int:
    """Number of positional parameters ``func`` takes."""
    code, _, skip = _code_of(func)
    if code.co_flags & _CO_VARARGS:
        raise TypeError(f"{func!r} takes a variable number of arguments")
    return code.co_argcount - skip


def matches_prototype(func: Any, arity: int) -> bool:
    """Whether ``func`` can be called with ``arity`` positional arguments."""
    try:
        code, target, skip = _code_of(func)
    except TypeError:
        return False
    positional = code.co_argcount - skip
    defaults = len(getattr(target, "__defaults__", None) or ())
    required = max(positional - defaults, 0)
    if arity < required:
        return False
    if arity > positional and not code.co_flags & _CO_VARARGS:
        return False
    kw_defaults = getattr(target, "__kwdefaults__", None) or {}
    return code.co_kwonlyargcount <= len(kw_defaults)


def _invoke(userdata: Callable[..., Any], *args: Any) -> Any:
    return userdata(*args)


def _invoke_last(*args: Any) -> Any:
    *params, userdata = args
    return userdata(*params)


class Function:
    """An owning callable wrapper that may be empty."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[..., Any] | None = None) -> None:
        if func is not None and not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self._func = func

    def __call__(self, *args: Any) -> Any:
        if self._func is None:
            raise TypeError("call of an empty Function")
        return self._func(*args)

    def __bool__(self) -> bool:
        return self._func is not None

    def callback(self) -> Callable[..., Any] | None:
        """A plain function taking the userdata first, or None when empty."""
        return None if self._func is None else _invoke

    def callback2(self) -> Callable[..., Any] | None:
        """A plain function taking the userdata last, or None when empty."""
        return None if self._func is None else _invoke_last

    def userdata(self) -> Callable[..., Any] | None:
        return self._func


class StaticFunction:
    """A copyable callable wrapper; copies duplicate the wrapped callable."""

    __slots__ = ("_func",)

    def __init__(self, func: Any = None) -> None:
        if isinstance(func, StaticFunction):
            func = copy.copy(func._func)
        elif func is not None and not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self._func = func

    def __call__(self, *args: Any) -> Any:
        if self._func is None:
            raise TypeError("call of an empty StaticFunction")
        return self._func(*args)

    def __bool__(self) -> bool:
        return self._func is not None

    def __copy__(self) -> StaticFunction:
        return StaticFunction(self)

    def callback(self) -> Callable[..., Any]:
        """A plain function taking the userdata first."""
        return _invoke

    def callback2(self) -> Callable[..., Any]:
        """A plain function taking the userdata last."""
        return _invoke_last

    def userdata(self) -> StaticFunction:
        return self


class Callback:
    """A non-owning pair of plain function and userdata."""

    __slots__ = ("_userdata", "_invoke")

    def __init__(self, source: Function | StaticFunction | None = None) -> None:
        if source is None:
            self._userdata = None
            self._invoke = None
        elif isinstance(source, Function):
            self._userdata = source.userdata()
            self._invoke = source.callback()
        elif isinstance(source, StaticFunction):
            self._userdata = source.userdata() if source else None
            self._invoke = source.callback()
        else:
            raise TypeError("Callback needs a Function or a StaticFunction")

    def __call__(self, *args: Any) -> Any:
        if self._userdata is None or self._invoke is None:
            raise TypeError("call of an empty Callback")
        return self._invoke(self._userdata, *args)

    def __bool__(self) -> bool:
        return self._userdata is not None