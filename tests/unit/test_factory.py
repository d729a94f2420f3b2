"""
Unit tests for the model registry and SuperModelFactory.
"""

import logging

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from supermodel import (
    ModelConfigurationError,
    ModelRegistry,
    SuperModel,
    SuperModelFactory,
    model_registry,
    register_model,
)
from tests.models import BasicModel, Car

pytestmark = pytest.mark.unit


class IncompleteModel(SuperModel):
    """Never implements get_model_name()."""


class NotAModel:
    pass


class TestLoad:
    def test_load_with_class(self):
        model = SuperModelFactory.load("foo", BasicModel)
        assert type(model) is BasicModel

    def test_load_with_dotted_path(self):
        model = SuperModelFactory.load("car", "tests.models.Car")
        assert isinstance(model, Car)

    def test_load_passes_data(self):
        model = SuperModelFactory.load("car", Car, data={"id": "1", "marque": "Ford"})
        assert model.get_data() == {"id": "1", "marque": "ford"}

    def test_unregistered_name_is_configuration_error(self):
        with pytest.raises(ModelConfigurationError) as exc_info:
            SuperModelFactory.load("boat")

        assert isinstance(exc_info.value, ImproperlyConfigured)
        assert exc_info.value.model_name == "boat"
        assert str(exc_info.value) == 'Invalid model name "boat"'

    def test_unimportable_path(self):
        with pytest.raises(ModelConfigurationError):
            SuperModelFactory.load("car", "tests.models.Boat")

        with pytest.raises(ModelConfigurationError):
            SuperModelFactory.load("car", "nodots")

    def test_class_must_be_a_supermodel(self):
        with pytest.raises(ModelConfigurationError):
            SuperModelFactory.load("thing", NotAModel)

        with pytest.raises(ModelConfigurationError):
            SuperModelFactory.load("thing", "tests.models.PropertyType")

    def test_abstract_class_rejected(self):
        with pytest.raises(ModelConfigurationError) as exc_info:
            SuperModelFactory.load("incomplete", IncompleteModel)
        assert "abstract" in str(exc_info.value)

    def test_load_registered_name(self):
        model_registry.register("car", Car)
        assert isinstance(SuperModelFactory.load("car"), Car)

    def test_load_name_from_settings(self):
        with override_settings(SUPERMODEL={"model_types": {"car": "tests.models.Car"}}):
            assert isinstance(SuperModelFactory.load("car"), Car)

        with pytest.raises(ModelConfigurationError):
            SuperModelFactory.load("car")

    def test_registry_wins_over_settings(self):
        model_registry.register("car", BasicModel)

        with override_settings(SUPERMODEL={"model_types": {"car": Car}}):
            assert type(SuperModelFactory.load("car")) is BasicModel

    def test_invalid_class_in_settings(self):
        with override_settings(SUPERMODEL={"model_types": {"car": "tests.models.Nope"}}):
            with pytest.raises(ModelConfigurationError):
                SuperModelFactory.load("car")

    def test_get_model_types(self):
        model_registry.register("basic", BasicModel)

        with override_settings(SUPERMODEL={"model_types": {"car": "tests.models.Car"}}):
            assert SuperModelFactory().get_model_types() == {
                "car": "tests.models.Car",
                "basic": BasicModel,
            }

    def test_subclass_can_provide_model_types(self):
        class CarFactory(SuperModelFactory):
            def get_model_types(self):
                return {"car": Car}

        assert isinstance(CarFactory.load("car"), Car)


class TestRegistry:
    def test_register_and_unregister(self):
        registry = ModelRegistry()

        assert registry.register("car", Car) is Car
        assert registry.get("car") is Car
        assert "car" in registry
        assert registry.all() == {"car": Car}

        assert registry.unregister("car") is True
        assert registry.unregister("car") is False
        assert registry.get("car") is None

    def test_register_rejects_invalid_classes(self):
        registry = ModelRegistry()

        with pytest.raises(ModelConfigurationError):
            registry.register("thing", NotAModel)
        with pytest.raises(ModelConfigurationError):
            registry.register("incomplete", IncompleteModel)

        assert registry.all() == {}

    def test_replacing_registration_warns(self, caplog):
        registry = ModelRegistry()
        registry.register("car", Car)

        with caplog.at_level(logging.WARNING, logger="supermodel.factory"):
            registry.register("car", BasicModel)

        assert registry.get("car") is BasicModel
        assert "already registered" in caplog.text

    def test_clear(self):
        registry = ModelRegistry()
        registry.register("car", Car)
        registry.clear()
        assert registry.all() == {}

    def test_register_model_decorator(self):
        @register_model("van")
        class Van(SuperModel):
            def get_model_name(self):
                return "van"

        assert model_registry.get("van") is Van
        assert isinstance(SuperModelFactory.load("van"), Van)

    def test_register_model_default_name(self):
        registry = ModelRegistry()

        @register_model(registry=registry)
        class Truck(SuperModel):
            def get_model_name(self):
                return "truck"

        assert registry.get("truck") is Truck
        assert model_registry.get("truck") is None
