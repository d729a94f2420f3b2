"""
ModelProperty implementation.

A ModelProperty is the metadata attached to one named value of a model:
label, type, widget, default, flags and the update strategy that decides
whether the value may change during a given operation. Every setter returns
the property itself so definitions read as a chain::

    model.add_property("marque") \\
        .set_label("Marque") \\
        .set_required(True) \\
        .set_widget("select") \\
        .set_choices_callback("get_marque_choices")
"""

import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, Type, Union

from ..conf import get_settings
from ..operations import OperationType, UpdateStrategy
from .metadata import PropertyMetadata
from .types import PropertyType

logger = logging.getLogger(__name__)

Callback = Union[str, Callable[..., Any]]


def _coerce_enum(enum_cls: Type[IntEnum], value: Any) -> Any:
    """Map plain integers onto enum members, leaving other values untouched."""
    if isinstance(value, enum_cls):
        return value
    return enum_cls._value2member_map_.get(value, value)


def normalize_choices(choices: Any) -> dict[Any, Any]:
    """Accept a mapping or an iterable of (value, label) pairs."""
    if isinstance(choices, Mapping):
        return dict(choices)
    normalized = {}
    for choice in choices:
        if isinstance(choice, (list, tuple)) and len(choice) == 2:
            value, label = choice
        else:
            value = label = choice
        normalized[value] = label
    return normalized


class ModelProperty:
    """Metadata for one named property of a model."""

    def __init__(self, name: str):
        self._name = name
        self._options: dict[str, Any] = {}
        self._callbacks: dict[str, Callback] = {}
        self._property_type: Optional[Union[PropertyType, str]] = None
        self._widget: Optional[str] = None
        self._default_value: Any = None
        self._hidden = False
        # Owning model, set by SuperModel.add_property().
        self._model: Optional[Any] = None

        self.set_option("update_strategy", UpdateStrategy.MUTABLE)

    @classmethod
    def create(cls, name: str) -> "ModelProperty":
        """Lazy factory, mirrors ``ModelProperty(name)``."""
        return cls(name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"

    # ------------------------------------------------------------------ #
    # Raw option and callback storage
    # ------------------------------------------------------------------ #

    def get_option(self, key: str, default: Any = None) -> Any:
        if self._options.get(key) is not None:
            return self._options[key]
        return default

    def set_option(self, key: str, value: Any) -> "ModelProperty":
        self._options[key] = value
        return self

    def get_callback(self, option: str) -> Optional[Callback]:
        """
        Return the callback registered for an option.

        Returns:
            A callable, a method name on the owning model, or None.
        """
        return self._callbacks.get(option)

    def set_callback(self, option: str, callback: Callback) -> "ModelProperty":
        if not (callable(callback) or isinstance(callback, str)):
            raise TypeError(
                f"Callback for '{option}' on property '{self._name}' must be "
                f"callable or a method name, got {type(callback).__name__}"
            )
        self._callbacks[option] = callback
        return self

    # ------------------------------------------------------------------ #
    # Name
    # ------------------------------------------------------------------ #

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> "ModelProperty":
        """
        Rename the property. This is the only way the name changes.

        A property owned by a model is renamed through
        SuperModel.rename_property() so the model stays keyed by the new name.
        """
        if self._model is not None:
            self._model.rename_property(self._name, name)
        else:
            self._apply_name(name)
        return self

    def _apply_name(self, name: str) -> None:
        logger.debug("Renaming property '%s' to '%s'", self._name, name)
        self._name = name

    def bind(self, model: Optional[Any]) -> "ModelProperty":
        """Attach the property to its owning model, or detach it with None."""
        self._model = model
        return self

    def get_model(self) -> Optional[Any]:
        return self._model

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------ #
    # Descriptive metadata
    # ------------------------------------------------------------------ #

    def get_label(self) -> str:
        """Return the label, falling back to the property name."""
        label = self.get_option("label")
        if label:
            return label
        return self._name

    def set_label(self, label: str) -> "ModelProperty":
        return self.set_option("label", label)

    def get_description(self) -> str:
        return self.get_option("description", "")

    def set_description(self, description: str) -> "ModelProperty":
        return self.set_option("description", description)

    def get_type(self) -> Optional[Union[PropertyType, str]]:
        return self._property_type

    def set_type(self, property_type: Union[PropertyType, str]) -> "ModelProperty":
        self._property_type = PropertyType.coerce(property_type)
        return self

    def get_widget(self) -> str:
        if self._widget is not None:
            return self._widget
        return get_settings().default_widget

    def set_widget(self, widget: str) -> "ModelProperty":
        self._widget = widget
        return self

    def get_max_length(self) -> Optional[int]:
        return self.get_option("max_length")

    def set_max_length(self, length: Optional[int]) -> "ModelProperty":
        if length is not None and length < 0:
            raise ValueError(
                f"max_length for property '{self._name}' cannot be negative"
            )
        return self.set_option("max_length", length)

    # ------------------------------------------------------------------ #
    # Defaults and choices
    # ------------------------------------------------------------------ #

    def get_default(self) -> Any:
        return self._default_value

    def set_default(self, value: Any) -> "ModelProperty":
        self._default_value = value
        return self

    def get_default_callback(self) -> Optional[Callback]:
        return self.get_callback("default_value")

    def set_default_callback(self, callback: Callback) -> "ModelProperty":
        return self.set_callback("default_value", callback)

    def get_choices(self) -> Optional[dict[Any, Any]]:
        """Return the static choices as ``{value: label}``, or None."""
        return self.get_option("choices")

    def set_choices(
        self, choices: Union[Mapping, Iterable[Any]]
    ) -> "ModelProperty":
        return self.set_option("choices", normalize_choices(choices))

    def get_choices_callback(self) -> Optional[Callback]:
        return self.get_callback("choices")

    def set_choices_callback(self, callback: Callback) -> "ModelProperty":
        return self.set_callback("choices", callback)

    # ------------------------------------------------------------------ #
    # Flags
    # ------------------------------------------------------------------ #

    def is_required(self) -> bool:
        return bool(self.get_option("required", False))

    def set_required(self, required: bool) -> "ModelProperty":
        return self.set_option("required", required)

    def is_hidden(self) -> bool:
        """
        Whether the property should be hidden on edit forms.

        Hidden properties usually need a default value, or must be filled in
        by the host application before saving.
        """
        return self._hidden

    def set_hidden(self, value: bool = True) -> "ModelProperty":
        self._hidden = value
        return self

    def is_unique(self) -> bool:
        return bool(self.get_option("unique", False))

    def set_unique(self, value: bool = True) -> "ModelProperty":
        """
        Flag the property as unique.

        Uniqueness is not enforced here; it is a hint for whatever stores the
        model.
        """
        return self.set_option("unique", value)

    def get_disabled(self) -> bool:
        """Whether the property is locked regardless of the operation."""
        return bool(self.get_option("disabled", False))

    def set_disabled(self, value: bool = True) -> "ModelProperty":
        """Lock the property for every operation, ignore_override included."""
        return self.set_option("disabled", value)

    # ------------------------------------------------------------------ #
    # Update strategy and editability
    # ------------------------------------------------------------------ #

    def get_update_strategy(self) -> Union[UpdateStrategy, int]:
        strategy = self.get_option("update_strategy")
        if strategy:
            return strategy
        return UpdateStrategy.MUTABLE

    def set_update_strategy(
        self, strategy: Union[UpdateStrategy, int] = UpdateStrategy.MUTABLE
    ) -> "ModelProperty":
        return self.set_option(
            "update_strategy", _coerce_enum(UpdateStrategy, strategy)
        )

    def is_editable(
        self,
        operation: Union[OperationType, int] = OperationType.UPDATE,
        ignore_override: bool = False,
    ) -> bool:
        """
        Whether the property may be changed during an operation.

        Args:
            operation: The operation being performed on the model.
                READ is never editable. For the other operations the property
                is editable when the operation value is lower than the update
                strategy value, so an IMMUTABLE property is only editable on
                DELETE and a CREATE_ONLY property on CREATE and DELETE.
            ignore_override: Skip the update strategy comparison. The
                disabled flag still applies.

        Returns:
            True if the property is editable for the operation.
        """
        if operation == OperationType.READ:
            return False

        enabled = not self.get_disabled()

        if operation >= self.get_update_strategy() and not ignore_override:
            enabled = False

        return enabled

    def is_disabled(
        self,
        operation: Union[OperationType, int] = OperationType.UPDATE,
        ignore_override: bool = False,
    ) -> bool:
        """Negation of is_editable()."""
        return not self.is_editable(operation, ignore_override)

    # ------------------------------------------------------------------ #
    # Serialization
    # ------------------------------------------------------------------ #

    def to_metadata(
        self, operation: Optional[Union[OperationType, int]] = None
    ) -> PropertyMetadata:
        """Build a PropertyMetadata snapshot of this definition."""
        property_type = self.get_type()
        strategy = self.get_update_strategy()
        choices = self.get_choices()

        return PropertyMetadata(
            name=self._name,
            label=self.get_label(),
            property_type=getattr(property_type, "value", property_type),
            widget=self.get_widget(),
            default_value=self.get_default(),
            description=self.get_description(),
            required=self.is_required(),
            hidden=self.is_hidden(),
            unique=self.is_unique(),
            disabled=self.get_disabled(),
            max_length=self.get_max_length(),
            choices=(
                [{"value": value, "label": label} for value, label in choices.items()]
                if choices is not None
                else None
            ),
            update_strategy=getattr(strategy, "name", str(strategy)),
            has_default_callback=self.get_default_callback() is not None,
            has_choices_callback=self.get_choices_callback() is not None,
            editable=(
                self.is_editable(operation) if operation is not None else None
            ),
        )
