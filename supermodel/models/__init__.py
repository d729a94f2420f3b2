"""
Model base class and metadata snapshot.
"""

from .base import SuperModel
from .metadata import ModelMetadata

__all__ = [
    "ModelMetadata",
    "SuperModel",
]
