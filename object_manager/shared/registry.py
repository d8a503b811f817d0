"""
Registries backing the object manager.

Plain dict-backed stores; the container owns the lock that guards them.
"""

from typing import Any, Callable, Dict, List, Optional, Type


class BindingRegistry:
    """Abstract type -> concrete type to build in its place."""

    def __init__(self):
        self._bindings: Dict[Type, Type] = {}

    def bind(self, abstract: Type, concrete: Type) -> None:
        self._bindings[abstract] = concrete

    def actual_type(self, key: Type) -> Type:
        """Bound concrete type, or ``key`` itself when nothing is bound."""
        return self._bindings.get(key, key)

    def items(self) -> Dict[Type, Type]:
        return dict(self._bindings)


class FactoryRegistry:
    """Type -> zero-argument callable that replaces normal construction."""

    def __init__(self):
        self._factories: Dict[Type, Callable[[], Any]] = {}

    def bind(self, key: Type, factory: Callable[[], Any]) -> None:
        if not callable(factory):
            raise TypeError(f"Factory for {key!r} must be callable, got {factory!r}")
        self._factories[key] = factory

    def lookup(self, actual: Type, requested: Type) -> Optional[Callable[[], Any]]:
        """Factory for the actual type first, then for the requested one."""
        factory = self._factories.get(actual)
        if factory is None:
            factory = self._factories.get(requested)
        return factory


class SingletonCache:
    """Requested type -> the instance handed out for it."""

    def __init__(self):
        self._instances: Dict[Type, Any] = {}

    def __contains__(self, key: Type) -> bool:
        return key in self._instances

    def get(self, key: Type) -> Any:
        return self._instances.get(key)

    def put(self, key: Type, instance: Any) -> None:
        self._instances[key] = instance

    def names(self) -> List[str]:
        return [getattr(key, "__name__", str(key)) for key in self._instances]
