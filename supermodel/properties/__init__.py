"""
Property metadata.

Exposes ModelProperty, the PropertyType hints and the PropertyMetadata
snapshot dataclass.
"""

from .metadata import PropertyMetadata
from .property import ModelProperty
from .types import PropertyType

__all__ = [
    "ModelProperty",
    "PropertyMetadata",
    "PropertyType",
]
