# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Design by contract checks for :mod:`langtour`.

Contracts are opt-in: they only run when ``LANGTOUR_DBC`` is set to a truthy
value or when a test forces them with :func:`dbc_enabled`. A predicate may
return a ``bool`` or a ``(bool, detail)`` tuple; a falsy outcome raises
``AssertionError`` naming the decorated callable.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from functools import wraps
from typing import cast

type ContractCallable = Callable[..., object]

_ENV_FLAG = "LANGTOUR_DBC"
_forced_state: bool | None = None


def _coerce_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in {"", "0", "false", "off", "no"}


def dbc_active() -> bool:
    """Return ``True`` when contract checks should run."""

    if _forced_state is not None:
        return _forced_state
    return _coerce_flag(os.getenv(_ENV_FLAG))


@contextmanager
def dbc_enabled(*, active: bool = True) -> Iterator[None]:
    """Temporarily force contract checks on or off inside a ``with`` block."""

    global _forced_state
    previous = _forced_state
    _forced_state = active
    try:
        yield
    finally:
        _forced_state = previous


def _qualname(target: object) -> str:
    return getattr(target, "__qualname__", repr(target))


def _outcome(result: object) -> tuple[bool, str | None]:
    if isinstance(result, tuple):
        pair = cast(Sequence[object], result)
        if not pair:
            msg = "Contract predicates must not return empty tuples"
            raise TypeError(msg)
        detail = None if len(pair) == 1 else str(pair[1])
        return bool(pair[0]), detail
    return bool(result), None


def _check(
    kind: str,
    func: Callable[..., object],
    predicate: ContractCallable,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> None:
    ok, detail = _outcome(predicate(*args, **kwargs))
    if ok:
        return
    predicate_name = getattr(predicate, "__name__", repr(predicate))
    msg = f"{kind} contract for {_qualname(func)} failed via {predicate_name}."
    if detail:
        msg = f"{msg} Details: {detail}"
    raise AssertionError(msg)


def require[**P, R](
    *predicates: ContractCallable,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check preconditions against the call arguments."""

    if not predicates:
        msg = "@require expects at least one predicate"
        raise ValueError(msg)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
            if dbc_active():
                for predicate in predicates:
                    _check("require", func, predicate, tuple(args), kwargs)
            return func(*args, **kwargs)

        return wrapped

    return decorator


def ensure[**P, R](
    *predicates: ContractCallable,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check postconditions; predicates receive the arguments plus ``result``."""

    if not predicates:
        msg = "@ensure expects at least one predicate"
        raise ValueError(msg)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
            result = func(*args, **kwargs)
            if dbc_active():
                for predicate in predicates:
                    _check(
                        "ensure",
                        func,
                        predicate,
                        tuple(args),
                        {**kwargs, "result": result},
                    )
            return result

        return wrapped

    return decorator


def invariant[T](*predicates: ContractCallable) -> Callable[[type[T]], type[T]]:
    """Check class invariants after ``__init__`` and around public methods."""

    if not predicates:
        msg = "@invariant expects at least one predicate"
        raise ValueError(msg)

    def check_all(instance: object, func: Callable[..., object]) -> None:
        for predicate in predicates:
            _check("invariant", func, predicate, (instance,), {})

    def wrap_method(method: Callable[..., object]) -> Callable[..., object]:
        @wraps(method)
        def wrapper(self: object, *args: object, **kwargs: object) -> object:
            if not dbc_active():
                return method(self, *args, **kwargs)
            check_all(self, method)
            try:
                return method(self, *args, **kwargs)
            finally:
                check_all(self, method)

        return wrapper

    def decorator(cls: type[T]) -> type[T]:
        original_init = cls.__init__

        @wraps(original_init)
        def init_wrapper(self: object, *args: object, **kwargs: object) -> None:
            original_init(self, *args, **kwargs)
            if dbc_active():
                check_all(self, original_init)

        type.__setattr__(cls, "__init__", init_wrapper)
        for attribute_name, attribute in list(cls.__dict__.items()):
            if attribute_name.startswith("_") or not callable(attribute):
                continue
            if isinstance(attribute, (staticmethod, classmethod)):
                continue
            setattr(cls, attribute_name, wrap_method(attribute))
        return cls

    return decorator


__all__ = [
    "dbc_active",
    "dbc_enabled",
    "ensure",
    "invariant",
    "require",
]
