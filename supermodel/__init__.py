"""
supermodel - declarative property metadata for data models.

Example Usage:
    from supermodel import SuperModel, SuperModelFactory, UpdateStrategy

    class Car(SuperModel):
        def get_model_name(self):
            return "car"

    car = SuperModelFactory.load("car", Car, data={"id": "1"})
"""

from .defaults import LIBRARY_VERSION as __version__
from .conf import SuperModelSettings, get_settings
from .exceptions import (
    ModelConfigurationError,
    PropertyNotFoundError,
    SuperModelError,
)
from .factory import (
    ModelRegistry,
    SuperModelFactory,
    model_registry,
    register_model,
)
from .models import ModelMetadata, SuperModel
from .operations import OperationType, UpdateStrategy
from .properties import ModelProperty, PropertyMetadata, PropertyType

__all__ = [
    "__version__",
    # Settings
    "SuperModelSettings",
    "get_settings",
    # Exceptions
    "ModelConfigurationError",
    "PropertyNotFoundError",
    "SuperModelError",
    # Factory
    "ModelRegistry",
    "SuperModelFactory",
    "model_registry",
    "register_model",
    # Models and properties
    "ModelMetadata",
    "ModelProperty",
    "PropertyMetadata",
    "PropertyType",
    "SuperModel",
    # Constants
    "OperationType",
    "UpdateStrategy",
]
