"""
Default configuration for the supermodel library.

Every setting the library reads is listed here. Projects override any of
them through the ``SUPERMODEL`` dictionary in their Django settings.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "django-supermodel"

SETTINGS_NAME = "SUPERMODEL"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Widget reported by properties that never called set_widget().
    "default_widget": "text",
    # Keys projected by SuperModel.get_list_item().
    "default_list_keys": ["id"],
    # Appended to the human name to build the plural form.
    "plural_suffix": "s",
    # Reject get/set of keys that are not declared properties.
    "strict_values": False,
    # Model name -> model class or dotted import path, used by the factory.
    "model_types": {},
}
