"""
Model registry and factory.

Host applications make their models loadable by name either through the
``model_types`` setting or by registering them::

    @register_model("car")
    class Car(SuperModel):
        ...

    car = SuperModelFactory.load("car")
"""

import inspect
import logging
from typing import Any, Callable, Mapping, Optional, Type, Union

from django.utils.module_loading import import_string

from .conf import get_settings
from .exceptions import ModelConfigurationError
from .models import SuperModel

logger = logging.getLogger(__name__)

ModelClass = Union[Type[SuperModel], str]


def _check_model_class(model_name: str, model_class: Any) -> Type[SuperModel]:
    if not (isinstance(model_class, type) and issubclass(model_class, SuperModel)):
        raise ModelConfigurationError(
            f'Invalid Model class "{model_class!r}" provided for model "{model_name}"',
            model_name=model_name,
        )
    if inspect.isabstract(model_class):
        raise ModelConfigurationError(
            f'Model class "{model_class.__name__}" for model "{model_name}" '
            "is abstract",
            model_name=model_name,
        )
    return model_class


class ModelRegistry:
    """Maps model names to SuperModel classes."""

    def __init__(self):
        self._models: dict[str, Type[SuperModel]] = {}

    def register(self, name: str, model_class: Type[SuperModel]) -> Type[SuperModel]:
        _check_model_class(name, model_class)
        existing = self._models.get(name)
        if existing is not None and existing is not model_class:
            logger.warning(
                "Model '%s' already registered as %s, replacing with %s",
                name,
                existing.__name__,
                model_class.__name__,
            )
        self._models[name] = model_class
        logger.debug("Registered model '%s': %s", name, model_class.__name__)
        return model_class

    def unregister(self, name: str) -> bool:
        if name in self._models:
            del self._models[name]
            logger.debug("Unregistered model '%s'", name)
            return True
        return False

    def get(self, name: str) -> Optional[Type[SuperModel]]:
        return self._models.get(name)

    def all(self) -> dict[str, Type[SuperModel]]:
        return dict(self._models)

    def clear(self) -> None:
        self._models.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._models


model_registry = ModelRegistry()


def register_model(
    name: Optional[str] = None, registry: Optional[ModelRegistry] = None
) -> Callable[[Type[SuperModel]], Type[SuperModel]]:
    """
    Class decorator registering a model under a name.

    The name defaults to the lowercased class name.
    """

    def decorator(model_class: Type[SuperModel]) -> Type[SuperModel]:
        target = registry if registry is not None else model_registry
        return target.register(name or model_class.__name__.lower(), model_class)

    return decorator


class SuperModelFactory:
    """Resolve model names to model classes and instantiate them."""

    registry: ModelRegistry = model_registry

    @classmethod
    def load(
        cls,
        model_name: str,
        model_class: Optional[ModelClass] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> SuperModel:
        """
        Load a new model.

        Args:
            model_name: The model name to load.
            model_class: Optional class or dotted path. Required when the
                name is not known to get_model_types().
            data: Optional initial values.

        Raises:
            ModelConfigurationError: if the name is unknown or the class is
                invalid.
        """
        factory = cls()

        if model_class is not None:
            return factory.create_model(model_name, model_class, data)

        model_types = factory.get_model_types()
        if model_name in model_types:
            return factory.create_model(model_name, model_types[model_name], data)

        raise ModelConfigurationError(
            f'Invalid model name "{model_name}"', model_name=model_name
        )

    def create_model(
        self,
        model_name: str,
        model_class: ModelClass,
        data: Optional[Mapping[str, Any]] = None,
    ) -> SuperModel:
        resolved = self.resolve_model_class(model_name, model_class)
        logger.debug("Creating model '%s' from %s", model_name, resolved.__name__)
        return resolved(data)

    def resolve_model_class(
        self, model_name: str, model_class: ModelClass
    ) -> Type[SuperModel]:
        if isinstance(model_class, str):
            try:
                model_class = import_string(model_class)
            except ImportError as exc:
                raise ModelConfigurationError(
                    f'Invalid Model class "{model_class}" provided for model '
                    f'"{model_name}"',
                    model_name=model_name,
                ) from exc
        return _check_model_class(model_name, model_class)

    def get_model_types(self) -> dict[str, ModelClass]:
        """Model classes keyed by name; registered models win over settings."""
        model_types: dict[str, ModelClass] = dict(get_settings().model_types)
        model_types.update(self.registry.all())
        return model_types
