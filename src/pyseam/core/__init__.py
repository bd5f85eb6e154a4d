"""Core material data structures and exceptions."""

from .exceptions import SeamInputError, FileOpenError, MissingFileError, MaterialNotFoundError
from .material_types import MaterialType, property_field_names, check_property_count
from .materials import MaterialRecord, MaterialStore

__all__ = [
    "SeamInputError",
    "FileOpenError",
    "MissingFileError",
    "MaterialNotFoundError",
    "MaterialType",
    "property_field_names",
    "check_property_count",
    "MaterialRecord",
    "MaterialStore"
]
