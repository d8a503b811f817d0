"""
Constructor resolution.

A class has a single construction entry point, its ``__init__``. The
resolver checks the caller's positional arguments against that signature
before calling it:

- the arguments have to bind to the signature at all;
- with strict matching, every argument bound to a parameter annotated with
  a class must have exactly that runtime type (no subclasses, ``True`` is
  not an ``int``). ``Optional[X]`` also admits ``None``; a ``Union`` admits
  exactly one of its members. Other annotations are not checked.

Classes nested in another class can ask for the enclosing instance by
annotating their first constructor parameter with the enclosing class; the
resolver then resolves that instance and passes it in front of the
caller's arguments.
"""

import inspect
import sys
import types
import typing
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, Type, Union

from object_manager.shared.exceptions import (
    BindingNotInstantiable,
    ConstructorNotFound,
    ObjectManagerError,
    ReflectiveConstructionFailure,
)

if TYPE_CHECKING:
    from object_manager.shared.cdi import ObjectManager

_UNION_TYPES = (Union, types.UnionType)


class ConstructorResolver:
    def __init__(self, container: "ObjectManager", strict: bool = True):
        self._container = container
        self.strict = strict

    # -------------------------
    # Entry points
    # -------------------------
    def invoke_factory(self, requested: Type, actual: Type, factory: Callable[[], Any]) -> Any:
        return self._call(requested, actual, factory, ())

    def instantiate(self, requested: Type, actual: Type, args: tuple) -> Any:
        if not self.is_instantiable(actual):
            raise BindingNotInstantiable(requested, actual)

        enclosing = self.enclosing_type(actual)
        if enclosing is not None and self._first_parameter_type(actual) is enclosing:
            args = (self._container.resolve(enclosing),) + tuple(args)

        self._match(requested, actual, args)
        return self._call(requested, actual, actual, args)

    # -------------------------
    # Type inspection
    # -------------------------
    @staticmethod
    def is_instantiable(cls: Type) -> bool:
        if not inspect.isclass(cls):
            return False
        if inspect.isabstract(cls):
            return False
        return not getattr(cls, "_is_protocol", False)

    @staticmethod
    def enclosing_type(cls: Type) -> Optional[Type]:
        """Class that ``cls`` is defined in, if it is nested in one."""
        qualname = getattr(cls, "__qualname__", "")
        if "." not in qualname or "<locals>" in qualname:
            return None
        owner: Any = sys.modules.get(cls.__module__)
        for part in qualname.split(".")[:-1]:
            owner = getattr(owner, part, None)
        return owner if inspect.isclass(owner) else None

    @staticmethod
    def _signature(cls: Type) -> Optional[inspect.Signature]:
        try:
            return inspect.signature(cls)
        except (TypeError, ValueError):
            # builtins without introspectable signatures
            return None

    @staticmethod
    def _hints(cls: Type) -> dict:
        try:
            return typing.get_type_hints(cls.__init__)
        except (NameError, TypeError, AttributeError):
            return {}

    def _first_parameter_type(self, cls: Type) -> Any:
        signature = self._signature(cls)
        if signature is None or not signature.parameters:
            return None
        first = next(iter(signature.parameters.values()))
        return self._hints(cls).get(first.name, first.annotation)

    # -------------------------
    # Argument matching
    # -------------------------
    def _match(self, requested: Type, actual: Type, args: tuple) -> None:
        signature = self._signature(actual)
        if signature is None:
            return
        try:
            bound = signature.bind(*args)
        except TypeError as exc:
            raise ConstructorNotFound(requested, actual, args, str(exc)) from None

        if not self.strict:
            return

        hints = self._hints(actual)
        for name, value in bound.arguments.items():
            parameter = signature.parameters[name]
            accepted = self._accepted_types(hints.get(name, parameter.annotation))
            if accepted is None:
                continue
            values = value if parameter.kind is inspect.Parameter.VAR_POSITIONAL else (value,)
            for item in values:
                if type(item) not in accepted:
                    expected = " | ".join(t.__name__ for t in accepted)
                    raise ConstructorNotFound(
                        requested,
                        actual,
                        args,
                        f"parameter {name!r} expects exactly {expected}, got {type(item).__name__}",
                    )

    @staticmethod
    def _accepted_types(hint: Any) -> Optional[Tuple[Type, ...]]:
        if hint is inspect.Parameter.empty or hint is Any or isinstance(hint, str):
            return None
        origin = typing.get_origin(hint)
        if origin is None and inspect.isclass(hint):
            return (hint,)
        if origin in _UNION_TYPES:
            members = typing.get_args(hint)
            if all(inspect.isclass(member) and typing.get_origin(member) is None for member in members):
                return members
        return None

    # -------------------------
    # Invocation
    # -------------------------
    @staticmethod
    def _call(requested: Type, actual: Type, target: Callable, args: tuple) -> Any:
        try:
            return target(*args)
        except (ObjectManagerError, RecursionError):
            raise
        except Exception as exc:
            raise ReflectiveConstructionFailure(requested, actual, exc) from exc
