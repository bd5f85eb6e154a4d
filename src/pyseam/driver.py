"""
Top-level driver: resolve the control file, report the input paths and load
the material file for the downstream analysis.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pyseam.core.exceptions import FileOpenError
from pyseam.core.materials import MaterialStore
from pyseam.parsing.api import load_materials
from pyseam.parsing.config.file_keys import ROLE_LABELS
from pyseam.parsing.config.run_config import RunConfig, load_run_config
from pyseam.parsing.io.control_file import ControlFileResolver, ResolvedInputFiles

logger = logging.getLogger(__name__)


@dataclass
class SeamInput:
    """Everything read from the input folder; ``materials`` is None when no material file resolved."""
    files: ResolvedInputFiles
    materials: Optional[MaterialStore] = None


def run(config: Optional[RunConfig] = None) -> SeamInput:
    """
    Resolve the control file and load the material file it names.
    Raises:
        FileOpenError: If the control file or the resolved material file cannot be opened
    """
    config = config or RunConfig()
    files = ControlFileResolver(config).resolve()
    for role, path in files.as_dict().items():
        logger.debug("%s file path: %s", ROLE_LABELS[role], path if path is not None else '')
    materials = None
    if files.material is not None:
        materials = load_materials(files.material, encoding=config.encoding)
    else:
        logger.warning("No material file resolved from %s", config.control_file)
    return SeamInput(files=files, materials=materials)


def main(config_path: Optional[Union[str, Path]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    config = load_run_config(config_path) if config_path is not None else RunConfig()
    try:
        seam_input = run(config)
    except FileOpenError:
        logger.error("Unable to open the input file")
        return 1
    for role, path in seam_input.files.as_dict().items():
        print(f"{ROLE_LABELS[role]} file path: {path if path is not None else ''}")
    if seam_input.materials is not None:
        print(seam_input.materials.format(), end='')
    return 0
