"""
pyseam - A Python reader for SEAM acoustic/structural analysis input files.

This library loads the fixed-format text inputs of a SEAM analysis into
in-memory structures: the control file that lists the role-keyed input
files, and the REV 3.0 material file of two-line material records.

Key Features:
- Lenient material file parsing (comments, blank lines, block markers,
  comma or whitespace separated fields)
- Material type schema (MP1..MP6 field names per type)
- Control file resolution of material, subsystem, junction, excitation
  and parameter files
- YAML run configuration

Main Components:
- Core: Material records, the material store and exceptions
- Parsing: Material file parser, line classification, control file resolver
- Data: File conventions and parser constants
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pyseam")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core material definitions
from .core.exceptions import SeamInputError, FileOpenError, MissingFileError, MaterialNotFoundError
from .core.material_types import MaterialType
from .core.materials import MaterialRecord, MaterialStore

# Main API functions
from .parsing.api import (
    load_materials,
    query_material,
    format_materials,
    resolve_input_files,
    get_material_info
)

# Parsing and configuration
from .parsing.config.material_file_parser import MaterialFileParser
from .parsing.config.run_config import RunConfig, load_run_config
from .parsing.io.control_file import ControlFileResolver, ResolvedInputFiles

__all__ = [
    # Version
    '__version__',

    # Core classes
    'MaterialRecord',
    'MaterialStore',
    'MaterialType',

    # Exceptions
    'SeamInputError',
    'FileOpenError',
    'MissingFileError',
    'MaterialNotFoundError',

    # Main API
    'load_materials',
    'query_material',
    'format_materials',
    'resolve_input_files',
    'get_material_info',

    # Parsing
    'MaterialFileParser',
    'RunConfig',
    'load_run_config',
    'ControlFileResolver',
    'ResolvedInputFiles'
]

# Package metadata
__description__ = "Reader for SEAM acoustic/structural analysis input files"
