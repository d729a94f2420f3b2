"""Dataclass snapshot of a property definition."""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass
class PropertyMetadata:
    """Serializable description of a single model property."""

    name: str
    label: str
    property_type: Optional[str]
    widget: str
    default_value: Any
    description: str
    required: bool
    hidden: bool
    unique: bool
    disabled: bool
    max_length: Optional[int]
    choices: Optional[list[dict[str, Any]]]
    update_strategy: str
    has_default_callback: bool = False
    has_choices_callback: bool = False
    is_primary_key: bool = False
    editable: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
