"""
SuperModelSettings implementation.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from django.conf import settings as django_settings

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME

logger = logging.getLogger(__name__)


def _merge_settings_dicts(*dicts: dict[str, Any]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d:
            result.update(d)
    return result


def _get_project_settings() -> dict[str, Any]:
    """Read the SUPERMODEL dictionary from Django settings."""
    if not django_settings.configured:
        return {}
    project_settings = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(project_settings, dict):
        logger.warning(
            "Ignoring %s setting: expected a dict, got %s",
            SETTINGS_NAME,
            type(project_settings).__name__,
        )
        return {}
    return project_settings


@dataclass
class SuperModelSettings:
    """Settings for model and property behaviour."""

    default_widget: str = "text"
    default_list_keys: List[str] = field(default_factory=lambda: ["id"])
    plural_suffix: str = "s"
    strict_values: bool = False
    model_types: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls) -> "SuperModelSettings":
        defaults = copy.deepcopy(LIBRARY_DEFAULTS)
        merged = _merge_settings_dicts(defaults, _get_project_settings())
        # An explicit None means "use the library default".
        for key, value in merged.items():
            if value is None and key in LIBRARY_DEFAULTS:
                merged[key] = copy.deepcopy(LIBRARY_DEFAULTS[key])
        valid_fields = set(cls.__dataclass_fields__.keys())
        unknown = set(merged) - valid_fields
        if unknown:
            logger.debug("Ignoring unknown %s keys: %s", SETTINGS_NAME, sorted(unknown))
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})


def get_settings() -> SuperModelSettings:
    """Return the current settings; read on every call so overrides apply."""
    return SuperModelSettings.load()
