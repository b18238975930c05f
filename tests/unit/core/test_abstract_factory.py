"""Unit tests for TypeAbstractFactory pattern"""

import pytest
from abc import ABC, abstractmethod

from core.abstract_factory import TypeAbstractFactory


class Animal(ABC):
    """Abstract base class for testing"""

    @abstractmethod
    def speak(self) -> str:
        ...


class AnimalFactory(TypeAbstractFactory[str, Animal]):
    pass


@AnimalFactory.register("dog")
class Dog(Animal):
    def __init__(self, name: str = "Buddy"):
        self.name = name

    def speak(self) -> str:
        return "Woof!"


class Cat(Animal):
    def __init__(self, name: str = "Whiskers"):
        self.name = name

    def speak(self) -> str:
        return "Meow!"


AnimalFactory.register_constructor("cat", lambda name="Whiskers": Cat(name))


class UpperKeyFactory(TypeAbstractFactory[str, str]):

    @classmethod
    def normalize_key(cls, key: str) -> str:
        return key.upper()


@pytest.mark.unit
class TestTypeAbstractFactoryRegistration:

    def test_register_decorator_adds_class_to_registry(self):
        """
        GIVEN a TypeAbstractFactory subclass
        WHEN a class is decorated with @Factory.register(key)
        THEN it should be added to the factory's registry
        """
        assert "dog" in AnimalFactory.list_keys()

    def test_register_returns_original_class(self):
        assert Dog.__name__ == "Dog"

    def test_register_constructor_accepts_plain_callables(self):
        """
        GIVEN a constructor function registered under a key
        WHEN create is called with that key
        THEN the function's product is returned
        """
        cat = AnimalFactory.create("cat", name="Mittens")

        assert isinstance(cat, Cat)
        assert cat.name == "Mittens"

    def test_is_registered(self):
        assert AnimalFactory.is_registered("dog")
        assert not AnimalFactory.is_registered("bird")

    def test_unregister_removes_key(self):
        class ScratchFactory(TypeAbstractFactory[str, int]):
            pass

        ScratchFactory.register_constructor("one", lambda: 1)
        ScratchFactory.unregister("one")

        assert ScratchFactory.list_keys() == []

    def test_unregister_unknown_key_is_noop(self):
        class ScratchFactory(TypeAbstractFactory[str, int]):
            pass

        ScratchFactory.unregister("missing")

        assert ScratchFactory.list_keys() == []


@pytest.mark.unit
class TestTypeAbstractFactoryCreation:

    def test_create_instantiates_registered_class(self):
        dog = AnimalFactory.create("dog")

        assert isinstance(dog, Dog)
        assert dog.speak() == "Woof!"

    def test_create_passes_kwargs_to_constructor(self):
        dog = AnimalFactory.create("dog", name="Max")

        assert dog.name == "Max"

    def test_create_raises_keyerror_for_unregistered_key(self):
        with pytest.raises(KeyError):
            AnimalFactory.create("bird")

    def test_created_instances_are_independent(self):
        dog1 = AnimalFactory.create("dog", name="Max")
        dog2 = AnimalFactory.create("dog", name="Buddy")

        assert dog1 is not dog2

    def test_normalize_key_applies_to_register_and_create(self):
        """
        GIVEN a factory normalizing keys to upper case
        WHEN a key is registered in lower case and created in mixed case
        THEN both resolve to the same registry entry
        """
        UpperKeyFactory.register_constructor("get", lambda: "got")

        assert UpperKeyFactory.list_keys() == ["GET"]
        assert UpperKeyFactory.create("Get") == "got"


@pytest.mark.unit
class TestTypeAbstractFactoryIsolation:

    def test_factory_registries_are_isolated_per_subclass(self):
        class VehicleFactory(TypeAbstractFactory[str, object]):
            pass

        @VehicleFactory.register("car")
        class Car:
            pass

        assert "car" not in AnimalFactory.list_keys()
        assert "dog" not in VehicleFactory.list_keys()
        assert "car" in VehicleFactory.list_keys()

    def test_factory_subclass_has_empty_registry_initially(self):
        class EmptyFactory(TypeAbstractFactory[str, str]):
            pass

        assert EmptyFactory.list_keys() == []
