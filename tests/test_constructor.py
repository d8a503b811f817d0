from typing import Optional, Protocol, Union

import pytest

from object_manager.config.settings import ContainerSettings
from object_manager.shared.cdi import ObjectManager
from object_manager.shared.constructor import ConstructorResolver
from object_manager.shared.exceptions import (
    BindingNotInstantiable,
    ConstructorNotFound,
    ReflectiveConstructionFailure,
)


class Engine:
    def __init__(self, name: str, cylinders: int):
        self.name = name
        self.cylinders = cylinders


class Part:
    pass


class SparePart(Part):
    pass


class Shelf:
    def __init__(self, part: Part, label: Optional[str] = None, size: Union[int, float] = 1):
        self.part = part
        self.label = label
        self.size = size


class Untyped:
    def __init__(self, anything, *rest):
        self.anything = anything
        self.rest = rest


class Crates:
    def __init__(self, *crates: int):
        self.crates = crates


class Greeter(Protocol):
    def greet(self) -> str:
        ...


class Exploding:
    def __init__(self):
        raise ValueError("boom")


class Garage:
    class Door:
        def __init__(self, garage: "Garage", color: str = "red"):
            self.garage = garage
            self.color = color

    class Light:
        def __init__(self, watts: int = 60):
            self.watts = watts


class TestArgumentMatching:

    def test_exact_types_match(self, container):
        engine = container.construct(Engine, "v8", 8)
        assert (engine.name, engine.cylinders) == ("v8", 8)

    def test_wrong_arity(self, container, recording_logger):
        with pytest.raises(ConstructorNotFound):
            container.construct(Engine, "v8")

    def test_bool_is_not_int(self, container, recording_logger):
        with pytest.raises(ConstructorNotFound) as info:
            container.construct(Engine, "v8", True)
        assert "cylinders" in str(info.value)
        assert info.value.argument_types == (str, bool)

    def test_no_widening_to_base_class(self, container, recording_logger):
        with pytest.raises(ConstructorNotFound):
            container.construct(Shelf, SparePart())
        assert isinstance(container.construct(Shelf, Part()).part, Part)

    def test_optional_and_union(self, container, recording_logger):
        shelf = container.construct(Shelf, Part(), None, 2.5)
        assert shelf.label is None
        assert shelf.size == 2.5
        with pytest.raises(ConstructorNotFound):
            container.construct(Shelf, Part(), 7)

    def test_unannotated_parameters_accept_anything(self, container):
        untyped = container.construct(Untyped, 1, "two", 3.0)
        assert untyped.anything == 1
        assert untyped.rest == ("two", 3.0)

    def test_var_positional_checks_every_item(self, container, recording_logger):
        assert container.construct(Crates, 1, 2, 3).crates == (1, 2, 3)
        with pytest.raises(ConstructorNotFound):
            container.construct(Crates, 1, "2")

    def test_lenient_matching(self):
        container = ObjectManager(ContainerSettings(strict_argument_types=False))
        engine = container.construct(Engine, "v8", True)
        assert engine.cylinders is True
        with pytest.raises(ConstructorNotFound):
            container.construct(Engine)

    def test_mismatch_is_logged(self, container, recording_logger):
        with pytest.raises(ConstructorNotFound):
            container.resolve(Engine, 8, "v8")
        assert len(recording_logger.exceptions) == 1
        assert not container.has_instance(Engine)


class TestInstantiability:

    def test_protocol_is_not_instantiable(self, container, recording_logger):
        with pytest.raises(BindingNotInstantiable):
            container.resolve(Greeter)

    def test_is_instantiable(self):
        assert ConstructorResolver.is_instantiable(Engine)
        assert not ConstructorResolver.is_instantiable(Greeter)
        assert not ConstructorResolver.is_instantiable(len)


class TestConstructionFailure:

    def test_constructor_error_is_wrapped(self, container, recording_logger):
        with pytest.raises(ReflectiveConstructionFailure) as info:
            container.resolve(Exploding)
        error = info.value
        assert isinstance(error.__cause__, ValueError)
        assert error.requested is Exploding
        assert "boom" in str(error)
        assert not container.has_instance(Exploding)
        assert recording_logger.exceptions == [(str(error), error)]


class TestEnclosingType:

    def test_enclosing_type(self):
        assert ConstructorResolver.enclosing_type(Garage.Door) is Garage
        assert ConstructorResolver.enclosing_type(Garage) is None

    def test_enclosing_instance_is_prepended(self, container):
        door = container.construct(Garage.Door, "blue")
        assert door.garage is container.resolve(Garage)
        assert door.color == "blue"

    def test_nested_class_without_enclosing_parameter(self, container):
        light = container.construct(Garage.Light, 100)
        assert light.watts == 100
        assert not container.has_instance(Garage)
