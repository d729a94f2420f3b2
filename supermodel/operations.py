"""
Operation and update strategy constants.

Both enums are integers and are meant to be compared with each other: a
property may be changed during an operation only when the operation value
is lower than the property's update strategy value.
"""

from enum import IntEnum


class OperationType(IntEnum):
    """The CRUD action being performed on a model."""

    READ = 0
    DELETE = 1
    CREATE = 8
    UPDATE = 12


class UpdateStrategy(IntEnum):
    """Which operations may change a property."""

    IMMUTABLE = 5
    CREATE_ONLY = 10
    MUTABLE = 15
