import importlib
import inspect
from typing import Any

from object_manager.shared.exceptions import TypeNotFound


class TypeLocator:
    """Turns ``"package.module.QualName"`` into the class it names."""

    @staticmethod
    def locate(key: Any) -> Any:
        if not isinstance(key, str):
            return key

        parts = key.split(".")
        # longest importable prefix is the module, the rest is the qualname
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as exc:
                # a module further down failing to import is a real error
                if exc.name and not module_name.startswith(exc.name):
                    raise
                continue
            return TypeLocator._walk(key, module, parts[split:])

        raise TypeNotFound(key, "no importable module in name")

    @staticmethod
    def _walk(key: str, module: Any, attributes: list) -> Any:
        target = module
        for attribute in attributes:
            if not hasattr(target, attribute):
                raise TypeNotFound(key, f"{attribute!r} not found in {getattr(target, '__name__', target)}")
            target = getattr(target, attribute)
        if not inspect.isclass(target):
            raise TypeNotFound(key, "not a class")
        return target
