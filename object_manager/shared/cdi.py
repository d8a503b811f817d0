"""
Object Manager - lazy, caching service container.

Ask it for a type and it finds the class to build (bindings), reuses the
cached instance (``resolve``) or always builds a new one (``construct``),
prefers a registered factory over the constructor, and fills the ``Inject``
markers of whatever it built, recursing through the container for each.
"""

import threading
from typing import Any, Callable, Dict, List, Optional, Type

from object_manager.config.logger import get_logger
from object_manager.config.settings import ContainerSettings, Settings
from object_manager.shared.annotations import TypeKey
from object_manager.shared.constructor import ConstructorResolver
from object_manager.shared.exceptions import CircularDependency, ObjectManagerError, type_name
from object_manager.shared.injector import FieldInjector
from object_manager.shared.locator import TypeLocator
from object_manager.shared.logger.base import Logger
from object_manager.shared.registry import BindingRegistry, FactoryRegistry, SingletonCache


class ObjectManager:
    """Binding, factory and singleton registries plus the logic wiring them."""

    def __init__(self, settings: Optional[ContainerSettings] = None):
        self.settings = settings or Settings().container
        self._bindings = BindingRegistry()
        self._factories = FactoryRegistry()
        self._singletons = SingletonCache()
        self._constructor = ConstructorResolver(self, strict=self.settings.strict_argument_types)
        self._injector = FieldInjector(self)
        self._in_progress: List[Type] = []
        self._lock = threading.RLock()
        self.logger = get_logger()

    # -------------------------
    # Registration
    # -------------------------
    def bind(self, abstract: TypeKey, concrete: TypeKey) -> None:
        """When ``abstract`` is requested, build ``concrete`` instead."""
        with self._lock:
            abstract, concrete = TypeLocator.locate(abstract), TypeLocator.locate(concrete)
            self._bindings.bind(abstract, concrete)
            self.logger.debug(f"Bound {type_name(abstract)} -> {type_name(concrete)}")

    def bind_instance(self, key: TypeKey, instance: Any) -> None:
        """Register a ready-made singleton for ``key``."""
        with self._lock:
            self._singletons.put(TypeLocator.locate(key), instance)

    def bind_factory(self, key: TypeKey, factory: Callable[[], Any]) -> None:
        """Build ``key`` by calling ``factory()`` instead of its constructor."""
        with self._lock:
            self._factories.bind(TypeLocator.locate(key), factory)

    # -------------------------
    # Resolution
    # -------------------------
    def resolve(self, key: TypeKey, *args: Any) -> Any:
        """
        Get the singleton for ``key``, building it on first use.
        ``args`` are only used when the instance has to be built.
        """
        with self._lock:
            requested = TypeLocator.locate(key)
            if requested in self._singletons:
                return self._singletons.get(requested)

            instance = self._build(requested, args)
            self._singletons.put(requested, instance)
            self.logger.debug(f"Created singleton: {type_name(requested)}")
            return instance

    def construct(self, key: TypeKey, *args: Any) -> Any:
        """Always build a new instance of ``key``; the cache is not touched."""
        with self._lock:
            return self._build(TypeLocator.locate(key), args)

    # -------------------------
    # Introspection
    # -------------------------
    def has_instance(self, key: TypeKey) -> bool:
        with self._lock:
            return TypeLocator.locate(key) in self._singletons

    def bindings(self) -> Dict[Type, Type]:
        with self._lock:
            return self._bindings.items()

    def singletons(self) -> List[str]:
        """Return names of all cached requested types."""
        with self._lock:
            return self._singletons.names()

    # -------------------------
    # Building
    # -------------------------
    def _build(self, requested: Type, args: tuple) -> Any:
        actual = self._bindings.actual_type(requested)
        try:
            return self._create(requested, actual, args)
        except ObjectManagerError as exc:
            if not exc.reported:
                exc.reported = True
                self._report(exc)
            raise

    def _create(self, requested: Type, actual: Type, args: tuple) -> Any:
        factory = self._factories.lookup(actual, requested)
        if factory is not None:
            return self._constructor.invoke_factory(requested, actual, factory)

        # only the constructor path can recurse into the same type
        if self.settings.detect_cycles and actual in self._in_progress:
            raise CircularDependency(self._in_progress + [actual])

        self._in_progress.append(actual)
        try:
            instance = self._constructor.instantiate(requested, actual, args)
            self._injector.inject(instance, requested)
        finally:
            self._in_progress.pop()
        return instance

    def _report(self, error: ObjectManagerError) -> None:
        logger = self._get_logger()
        try:
            logger.log_exception(str(error), error)
            return
        except Exception as exc:
            if logger is self.logger:
                return
            failure = exc
        # the registered logger failed; the container error still propagates
        try:
            self.logger.warning(f"Registered logger failed to report an error: {failure!r}")
            self.logger.log_exception(str(error), error)
        except Exception:
            return

    def _get_logger(self) -> Logger:
        # only an already registered logger is used; never build one here
        registered = self._singletons.get(Logger)
        return registered if registered is not None else self.logger


# Global container
_container: Optional[ObjectManager] = None


def get_container() -> ObjectManager:
    """Get the process-wide ObjectManager, creating it on first use."""
    global _container
    if _container is None:
        _container = ObjectManager()
    return _container


def bind(abstract: TypeKey, concrete: TypeKey) -> None:
    get_container().bind(abstract, concrete)


def bind_instance(key: TypeKey, instance: Any) -> None:
    get_container().bind_instance(key, instance)


def bind_factory(key: TypeKey, factory: Callable[[], Any]) -> None:
    get_container().bind_factory(key, factory)


def resolve(key: TypeKey, *args: Any) -> Any:
    return get_container().resolve(key, *args)


def construct(key: TypeKey, *args: Any) -> Any:
    return get_container().construct(key, *args)
