"""
Injection marker.

    class Vehicle:
        driving_behavior: Drivable = Inject()
        engine = Inject(Engine, create=True)
        brakes: Brakes = Inject(concrete=DiscBrakes)
"""

import inspect
import typing
from typing import Any, Optional, Type, Union

TypeKey = Union[Type, str]


class Inject:
    """
    Marks a class attribute as a dependency filled in by the ObjectManager
    right after the owning object is built.

    Args:
        contract: Type to request. Defaults to the attribute's annotation.
        concrete: Type to request instead of the contract, ignoring any
            global binding for the contract.
        create: Build a fresh instance instead of using the cached singleton.
    """

    def __init__(
        self,
        contract: Optional[TypeKey] = None,
        *,
        concrete: Optional[TypeKey] = None,
        create: bool = False,
    ):
        self.contract = contract
        self.concrete = concrete
        self.create = create
        self.owner: Optional[Type] = None
        self.name: Optional[str] = None

    def __set_name__(self, owner: Type, name: str) -> None:
        self.owner = owner
        self.name = name

    def __get__(self, instance: Any, owner: Type) -> Any:
        if instance is None:
            return self
        # injected values live in the instance __dict__ and shadow the marker
        raise AttributeError(
            f"{owner.__name__}.{self.name} has not been injected; "
            f"build {owner.__name__} through the ObjectManager"
        )

    def target_type(self) -> Optional[TypeKey]:
        """Type the container should be asked for, or None if unknown."""
        if self.concrete is not None:
            return self.concrete
        if self.contract is None:
            self.contract = self._declared_type()
        return self.contract

    def _declared_type(self) -> Optional[Type]:
        if self.owner is None:
            return None
        try:
            hints = typing.get_type_hints(self.owner)
        except (NameError, TypeError):
            hints = getattr(self.owner, "__annotations__", {})
        declared = hints.get(self.name)
        return declared if inspect.isclass(declared) else None

    def __repr__(self) -> str:
        target = self.concrete or self.contract
        return f"Inject({getattr(target, '__name__', target)!r}, create={self.create})"
