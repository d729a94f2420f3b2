"""Dataclass snapshot of a model definition."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from ..properties.metadata import PropertyMetadata


@dataclass
class ModelMetadata:
    """Serializable description of a model and its properties."""

    model_name: str
    human_name: str
    human_name_plural: str
    primary_key: Optional[str]
    list_keys: list[str] = field(default_factory=list)
    properties: list[PropertyMetadata] = field(default_factory=list)
    operation: Optional[str] = None

    def get_property(self, name: str) -> Optional[PropertyMetadata]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
