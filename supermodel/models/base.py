"""
SuperModel base class.

A SuperModel pairs an ordered set of ModelProperty definitions with a
mapping of values. Subclasses describe their structure in get_structure()
and name themselves in get_model_name()::

    class Car(SuperModel):
        def get_model_name(self):
            return "car"

        def get_structure(self):
            super().get_structure()
            self.add_property("marque").set_label("Marque").set_required(True)

    car = Car({"id": "1", "marque": "ford"})
    car.get_list_item()  # {"id": "1"}
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional, Union

from ..conf import get_settings
from ..exceptions import ModelConfigurationError, PropertyNotFoundError
from ..operations import OperationType, UpdateStrategy
from ..properties import ModelProperty
from ..properties.property import normalize_choices
from .metadata import ModelMetadata

logger = logging.getLogger(__name__)

GET_VALUE_PREFIX = "get_value_"
SET_VALUE_PREFIX = "set_value_"


class SuperModel(ABC):
    """Base class for models described by property metadata."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._properties: dict[str, ModelProperty] = {}
        self._data: dict[str, Any] = {}
        self._primary_key: Optional[ModelProperty] = None

        self.get_structure()

        if data:
            for key, value in dict(data).items():
                self.set_value(key, value)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.get_model_name()!r} "
            f"pk={self.get_primary_identifier()!r}>"
        )

    # ------------------------------------------------------------------ #
    # Mapping and attribute access
    # ------------------------------------------------------------------ #

    def __getitem__(self, key: str) -> Any:
        return self.get_value(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_value(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset_value(key)

    def __contains__(self, key: object) -> bool:
        return self._data.get(key) is not None

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        properties = self.__dict__.get("_properties")
        if not name.startswith("_") and properties and name in properties:
            return self.get_value(name)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        properties = self.__dict__.get("_properties")
        if not name.startswith("_") and properties and name in properties:
            self.set_value(name, value)
            return
        super().__setattr__(name, value)

    # ------------------------------------------------------------------ #
    # Naming
    # ------------------------------------------------------------------ #

    @abstractmethod
    def get_model_name(self) -> str:
        """Return the machine name of the model, lowercase."""

    def get_human_name(self) -> str:
        """Human readable name. Defaults to the model name."""
        return self.get_model_name()

    def get_human_name_plural(self) -> str:
        return self.get_human_name() + get_settings().plural_suffix

    # ------------------------------------------------------------------ #
    # Structure
    # ------------------------------------------------------------------ #

    def get_structure(self) -> None:
        """
        Define the properties of the model.

        The default structure is a single immutable ``id`` primary key.
        Override this and call add_property() for each property, then
        set_primary_key().
        """
        self.add_property("id") \
            .set_label("Identifier") \
            .set_widget("textfield") \
            .set_required(True) \
            .set_update_strategy(UpdateStrategy.IMMUTABLE)

        self.set_primary_key("id")

    def add_property(self, name: str) -> ModelProperty:
        """
        Add a new property and return it for further configuration.

        Adding a name twice replaces the earlier definition but keeps its
        position.
        """
        existing = self._properties.get(name)
        if existing is not None:
            logger.debug(
                "Property '%s' on model '%s' redefined", name, type(self).__name__
            )
            existing.bind(None)
        prop = ModelProperty(name).bind(self)
        self._properties[name] = prop
        if self._primary_key is not None and self._primary_key.get_name() == name:
            self._primary_key = prop
        return prop

    def get_property(self, name: str) -> ModelProperty:
        try:
            return self._properties[name]
        except KeyError:
            raise PropertyNotFoundError(
                f'Invalid property "{name}" called',
                model_name=self.get_model_name(),
                property_name=name,
            ) from None

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_properties(self) -> dict[str, ModelProperty]:
        return dict(self._properties)

    def get_property_names(self) -> list[str]:
        return list(self._properties)

    def rename_property(self, old_name: str, new_name: str) -> ModelProperty:
        """Rename a property, keeping its position and any stored value."""
        prop = self.get_property(old_name)
        if new_name in self._properties and new_name != old_name:
            raise ModelConfigurationError(
                f'Cannot rename "{old_name}": property "{new_name}" already exists',
                model_name=self.get_model_name(),
            )
        prop._apply_name(new_name)
        self._properties = {
            (new_name if key == old_name else key): value
            for key, value in self._properties.items()
        }
        if old_name in self._data:
            self._data[new_name] = self._data.pop(old_name)
        return prop

    def get_editable_properties(
        self,
        operation: Union[OperationType, int] = OperationType.UPDATE,
        ignore_override: bool = False,
    ) -> list[ModelProperty]:
        return [
            prop
            for prop in self._properties.values()
            if prop.is_editable(operation, ignore_override)
        ]

    def get_visible_properties(self) -> list[ModelProperty]:
        return [prop for prop in self._properties.values() if not prop.is_hidden()]

    # ------------------------------------------------------------------ #
    # Primary key
    # ------------------------------------------------------------------ #

    def set_primary_key(self, property_name: str) -> "SuperModel":
        """
        Set the property holding the primary key.

        The property must already have been added.

        Raises:
            ModelConfigurationError: if no such property exists.
        """
        try:
            self._primary_key = self.get_property(property_name)
        except PropertyNotFoundError:
            raise ModelConfigurationError(
                f"Attempted to use non-existent property {property_name} "
                "as a primary key. Do you need to add it?",
                model_name=self.get_model_name(),
            ) from None
        return self

    def get_primary_key(self) -> Optional[str]:
        if self._primary_key is None:
            return None
        return self._primary_key.get_name()

    def get_primary_identifier(self) -> Any:
        """Return the primary key value, or None when unset."""
        primary_key = self.get_primary_key()
        if primary_key is None:
            return None
        return self._data.get(primary_key)

    # ------------------------------------------------------------------ #
    # Values
    # ------------------------------------------------------------------ #

    def _check_declared(self, key: str) -> None:
        if key not in self._properties and get_settings().strict_values:
            raise PropertyNotFoundError(
                f'Invalid property "{key}" called',
                model_name=self.get_model_name(),
                property_name=key,
            )

    def _find_override(self, prefix: str, key: Any) -> Optional[Callable[..., Any]]:
        if not isinstance(key, str) or not key.isidentifier():
            return None
        # Looked up on the class so __getattr__ is never consulted.
        if getattr(type(self), prefix + key, None) is None:
            return None
        return getattr(self, prefix + key)

    def get_data(self) -> dict[str, Any]:
        return dict(self._data)

    def get_value(self, key: str) -> Any:
        """
        Return the value of a key.

        A method named ``get_value_<key>`` takes precedence over the stored
        value.
        """
        self._check_declared(key)
        override = self._find_override(GET_VALUE_PREFIX, key)
        if override is not None:
            return override()
        return self._data.get(key)

    def set_value(self, key: str, value: Any) -> "SuperModel":
        """
        Set the value of a key.

        A method named ``set_value_<key>`` is called instead of storing the
        value directly; it is responsible for storing it (see store_value()).
        """
        self._check_declared(key)
        override = self._find_override(SET_VALUE_PREFIX, key)
        if override is not None:
            override(value)
        else:
            self._data[key] = value
        return self

    def store_value(self, key: str, value: Any) -> "SuperModel":
        """Store a value without override resolution, for use by set_value_<key>."""
        self._data[key] = value
        return self

    def unset_value(self, key: str) -> "SuperModel":
        self._data.pop(key, None)
        return self

    # ------------------------------------------------------------------ #
    # Callbacks, defaults and choices
    # ------------------------------------------------------------------ #

    def _resolve_callback(self, prop: ModelProperty, callback: Any) -> Any:
        """
        Run a property callback.

        Strings name a method on this model, called without arguments.
        Callables receive the model instance.
        """
        if isinstance(callback, str):
            method = getattr(type(self), callback, None)
            if not callable(method):
                raise ModelConfigurationError(
                    f'Callback "{callback}" for property "{prop.get_name()}" '
                    f'is not a method of {type(self).__name__}',
                    model_name=self.get_model_name(),
                )
            return getattr(self, callback)()
        return callback(self)

    def get_default_value(self, name: str) -> Any:
        prop = self.get_property(name)
        callback = prop.get_default_callback()
        if callback is not None:
            return self._resolve_callback(prop, callback)
        return prop.get_default()

    def apply_defaults(self, overwrite: bool = False) -> "SuperModel":
        """Fill unset values with property defaults."""
        for name in self._properties:
            if not overwrite and self._data.get(name) is not None:
                continue
            value = self.get_default_value(name)
            if value is not None:
                self.set_value(name, value)
        return self

    def get_choices(self, name: str) -> Optional[dict[Any, Any]]:
        """Return ``{value: label}`` choices, running the choices callback if set."""
        prop = self.get_property(name)
        callback = prop.get_choices_callback()
        if callback is not None:
            choices = self._resolve_callback(prop, callback)
            return normalize_choices(choices) if choices is not None else None
        return prop.get_choices()

    # ------------------------------------------------------------------ #
    # Listing and metadata
    # ------------------------------------------------------------------ #

    def get_list_keys(self) -> list[str]:
        """
        Keys shown when the model is listed.

        The configured default keys are limited to declared properties,
        falling back to the primary key when none of them is declared.
        """
        keys = [
            key for key in get_settings().default_list_keys if key in self._properties
        ]
        if not keys and self.get_primary_key() is not None:
            keys = [self.get_primary_key()]
        return keys

    def get_list_item(self) -> dict[str, Any]:
        return {key: self.get_value(key) for key in self.get_list_keys()}

    def to_metadata(
        self, operation: Optional[Union[OperationType, int]] = None
    ) -> ModelMetadata:
        primary_key = self.get_primary_key()
        properties = []
        for name, prop in self._properties.items():
            choices = self.get_choices(name)
            properties.append(
                replace(
                    prop.to_metadata(operation),
                    default_value=self.get_default_value(name),
                    choices=(
                        [{"value": value, "label": label} for value, label in choices.items()]
                        if choices is not None
                        else None
                    ),
                    is_primary_key=name == primary_key,
                )
            )

        if operation is not None:
            operation = OperationType(operation).name

        return ModelMetadata(
            model_name=self.get_model_name(),
            human_name=self.get_human_name(),
            human_name_plural=self.get_human_name_plural(),
            primary_key=primary_key,
            list_keys=self.get_list_keys(),
            properties=properties,
            operation=operation,
        )
