"""
Parsing modules for pyseam.

This package handles material file parsing, line classification,
control file resolution and run configuration loading.
"""

from .api import load_materials, query_material, format_materials, resolve_input_files, get_material_info
from .config.material_file_parser import MaterialFileParser
from .config.run_config import RunConfig, load_run_config
from .io.control_file import ControlFileResolver, ResolvedInputFiles
from .validation.line_classifier import LineKind, RecordPhase, classify_line

__all__ = [
    'load_materials',
    'query_material',
    'format_materials',
    'resolve_input_files',
    'get_material_info',
    'MaterialFileParser',
    'RunConfig',
    'load_run_config',
    'ControlFileResolver',
    'ResolvedInputFiles',
    'LineKind',
    'RecordPhase',
    'classify_line'
]
