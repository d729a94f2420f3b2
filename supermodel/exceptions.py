"""
Custom exceptions for supermodel.

Property lookups and model configuration fail fast with these types so host
applications can tell a programming error in a model definition apart from
other failures.
"""

from typing import Optional

from django.core.exceptions import ImproperlyConfigured


class SuperModelError(Exception):
    """Base exception for supermodel errors."""

    def __init__(self, message: str, model_name: Optional[str] = None):
        self.model_name = model_name
        super().__init__(message)


class PropertyNotFoundError(SuperModelError, KeyError):
    """Raised when a property that was never added is accessed."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        property_name: Optional[str] = None,
    ):
        self.property_name = property_name
        super().__init__(message, model_name)

    def __str__(self) -> str:
        # KeyError quotes its argument.
        return str(self.args[0]) if self.args else ""


class ModelConfigurationError(SuperModelError, ImproperlyConfigured):
    """Raised when a model, model class or primary key is misconfigured."""

    pass
