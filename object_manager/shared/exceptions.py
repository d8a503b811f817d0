"""
Errors raised by the object manager.

Every error remembers the type the caller asked for and the type the
container actually tried to build, so a failure deep inside an object graph
still says which request it belonged to.
"""

from typing import Any, List, Optional


def type_name(key: Any) -> str:
    """Readable name for a type key (class or dotted string)."""
    if isinstance(key, str):
        return key
    module = getattr(key, "__module__", None)
    qualname = getattr(key, "__qualname__", None)
    if module and qualname:
        return f"{module}.{qualname}"
    return repr(key)


class ObjectManagerError(RuntimeError):
    """Base class for everything the container raises."""

    def __init__(self, message: str, requested: Any = None, actual: Any = None):
        super().__init__(message)
        self.requested = requested
        self.actual = actual
        # set once the error has gone through the container logger
        self.reported = False


class BindingNotInstantiable(ObjectManagerError):
    def __init__(self, requested: Any, actual: Any):
        super().__init__(
            f"Can't create instance of {type_name(actual)}: it is abstract and "
            f"no binding or factory is registered for {type_name(requested)}",
            requested,
            actual,
        )


class ConstructorNotFound(ObjectManagerError):
    def __init__(self, requested: Any, actual: Any, args: tuple, reason: str):
        arg_types = ", ".join(type(arg).__name__ for arg in args)
        super().__init__(
            f"No constructor of {type_name(actual)} accepts ({arg_types}): {reason}",
            requested,
            actual,
        )
        self.argument_types = tuple(type(arg) for arg in args)


class ReflectiveConstructionFailure(ObjectManagerError):
    def __init__(
        self,
        requested: Any,
        actual: Any,
        cause: BaseException,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"Could not instantiate class {type_name(requested)}: {cause}",
            requested,
            actual,
        )
        self.cause = cause


class InjectionError(ReflectiveConstructionFailure):
    """An ``Inject`` marker could not be turned into a value."""

    def __init__(self, requested: Any, actual: Any, attribute: str, cause: BaseException):
        super().__init__(
            requested,
            actual,
            cause,
            f"Could not inject {type_name(actual)}.{attribute}: {cause}",
        )
        self.attribute = attribute


class CircularDependency(ObjectManagerError):
    def __init__(self, chain: List[Any]):
        super().__init__(
            "Circular dependency detected: " + " -> ".join(type_name(t) for t in chain),
            chain[0] if chain else None,
            chain[-1] if chain else None,
        )
        self.chain = list(chain)


class TypeNotFound(ObjectManagerError):
    def __init__(self, name: str, reason: Optional[str] = None):
        message = f"Type not found: {name}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, name, None)
        self.name = name
