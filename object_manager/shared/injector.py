from typing import TYPE_CHECKING, Any, Dict, Type

from object_manager.shared.annotations import Inject
from object_manager.shared.exceptions import InjectionError

if TYPE_CHECKING:
    from object_manager.shared.cdi import ObjectManager


class FieldInjector:
    """Fills the ``Inject`` markers of a freshly built object."""

    def __init__(self, container: "ObjectManager"):
        self._container = container

    @staticmethod
    def markers(cls: Type) -> Dict[str, Inject]:
        """
        Injection markers visible on ``cls``, including the ones declared by
        its ancestors. The nearest definition of a name wins, so a subclass
        can override or remove (by assigning a plain value) a parent marker.
        """
        found: Dict[str, Inject] = {}
        seen = set()
        for klass in cls.__mro__:
            for name, value in vars(klass).items():
                if name in seen:
                    continue
                seen.add(name)
                if isinstance(value, Inject):
                    found[name] = value
        return found

    def inject(self, instance: Any, requested: Type) -> None:
        for name, marker in self.markers(type(instance)).items():
            target = marker.target_type()
            if target is None:
                raise InjectionError(
                    requested,
                    type(instance),
                    name,
                    TypeError("no contract type given and no class annotation to infer it from"),
                )

            if marker.create:
                value = self._container.construct(target)
            else:
                value = self._container.resolve(target)

            try:
                object.__setattr__(instance, name, value)
            except (AttributeError, TypeError) as exc:
                raise InjectionError(requested, type(instance), name, exc) from exc
