import logging
from pathlib import Path
from typing import Optional, Union

from pyseam.core.material_types import MaterialType
from pyseam.core.materials import MaterialRecord, MaterialStore
from pyseam.data.constants import FileConstants
from pyseam.parsing.config.material_file_parser import MaterialFileParser
from pyseam.parsing.config.run_config import RunConfig
from pyseam.parsing.io.control_file import ControlFileResolver, ResolvedInputFiles

logger = logging.getLogger(__name__)


def load_materials(mat_path: Union[str, Path], store: Optional[MaterialStore] = None,
                   encoding: str = FileConstants.DEFAULT_ENCODING) -> MaterialStore:
    """
    Load the material records of a SEAM material file.

    This function is the main entry point for reading material files. Lines
    that cannot be interpreted are skipped; only an unreadable file is an error.
    Args:
        mat_path: Path to the material file
        store: Optional existing store; parsed records replace records with the
            same id. It is left untouched if the file cannot be opened.
        encoding: Text encoding of the file
    Returns:
        The store holding the parsed records
    Raises:
        FileOpenError: If the file cannot be opened for reading
    Examples:
        store = load_materials('seamInputFiles/plate.mat')
        steel = query_material(store, '1011')
        print(steel.properties)
    """
    return MaterialFileParser(mat_path, encoding=encoding).parse(store)


def query_material(store: MaterialStore, material_id: Union[str, int]) -> MaterialRecord:
    """
    Look up a material by id.
    Raises:
        MaterialNotFoundError: If no record has that id
    """
    return store.query(str(material_id))


def format_materials(store: MaterialStore) -> str:
    """Human-readable listing of every material in the store, ordered by id."""
    return store.format()


def resolve_input_files(input_folder: Optional[Union[str, Path]] = None,
                        control_file_name: Optional[str] = None,
                        config: Optional[RunConfig] = None) -> ResolvedInputFiles:
    """
    Resolve the role-keyed input files listed in a control file.
    Args:
        input_folder: Folder holding the control file and input files (overrides ``config``)
        control_file_name: Control file name inside the folder (overrides ``config``)
        config: Base run configuration; defaults to ``RunConfig()``
    Raises:
        FileOpenError: If the control file cannot be opened
    """
    config = (config or RunConfig()).with_overrides(input_folder=input_folder,
                                                    control_file_name=control_file_name)
    return ControlFileResolver(config).resolve()


def get_material_info(mat_path: Union[str, Path]) -> dict:
    """
    Get summary information about a material file.
    Args:
        mat_path: Path to the material file
    Returns:
        Dictionary containing material file information
    Example:
        info = get_material_info('plate.mat')
        print(f"Materials: {info['total_materials']}")
    """
    store = load_materials(mat_path)
    type_counts = {}
    for record in store.records():
        type_counts[record.material_type] = type_counts.get(record.material_type, 0) + 1
    return {
        'file': str(mat_path),
        'total_materials': len(store),
        'material_ids': store.ids(),
        'material_types': type_counts,
        'unknown_types': sorted({record.material_type for record in store.records()
                                 if MaterialType.from_tag(record.material_type) is None}),
        'unexpected_property_counts': [record.material_id for record in store.records()
                                       if MaterialType.from_tag(record.material_type) is not None
                                       and not record.has_expected_property_count()],
    }
