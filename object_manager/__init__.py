"""
Object Manager: a small service container with lazy singletons, factories
and field injection.
"""

from object_manager.shared.annotations import Inject
from object_manager.shared.cdi import (
    ObjectManager,
    bind,
    bind_factory,
    bind_instance,
    construct,
    get_container,
    resolve,
)
from object_manager.shared.exceptions import (
    BindingNotInstantiable,
    CircularDependency,
    ConstructorNotFound,
    InjectionError,
    ObjectManagerError,
    ReflectiveConstructionFailure,
    TypeNotFound,
)
from object_manager.shared.logger import ConsoleLogger, Logger

__all__ = [
    "Inject",
    "ObjectManager",
    "bind",
    "bind_factory",
    "bind_instance",
    "construct",
    "get_container",
    "resolve",
    "BindingNotInstantiable",
    "CircularDependency",
    "ConstructorNotFound",
    "InjectionError",
    "ObjectManagerError",
    "ReflectiveConstructionFailure",
    "TypeNotFound",
    "ConsoleLogger",
    "Logger",
]
