import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Dict, List, Optional

from pyseam.core.exceptions import FileOpenError, MissingFileError
from pyseam.data.constants import ControlFileConstants
from pyseam.parsing.config.file_keys import (
    MATERIAL_ROLE, SUBSYSTEM_ROLE, JUNCTION_ROLE, EXCITATION_ROLE, PARAMETER_ROLE
)
from pyseam.parsing.config.run_config import RunConfig

logger = logging.getLogger(__name__)

_PATH_SEPARATOR = re.compile(r'[\\/]+')


@dataclass
class ResolvedInputFiles:
    """Role-keyed input file paths found in a control file; unresolved roles stay None."""
    material: Optional[Path] = None
    subsystem: Optional[Path] = None
    junction: Optional[Path] = None
    excitation: Optional[Path] = None
    parameter: Optional[Path] = None
    diagnostics: List[str] = field(default_factory=list)

    ROLES = (MATERIAL_ROLE, SUBSYSTEM_ROLE, JUNCTION_ROLE, EXCITATION_ROLE, PARAMETER_ROLE)

    def as_dict(self) -> Dict[str, Optional[Path]]:
        return {role: getattr(self, role) for role in self.ROLES}

    def missing_roles(self) -> List[str]:
        return [role for role, path in self.as_dict().items() if path is None]


class ControlFileResolver:
    """
    Resolves the input file paths listed in a SEAM control file.

    Path lines are matched to a role by extension and checked for existence
    under the configured input folder. Problems are collected as diagnostics
    and never stop the remaining lines from being processed.
    """

    def __init__(self, config: Optional[RunConfig] = None) -> None:
        self.config = config or RunConfig()

    def resolve(self) -> ResolvedInputFiles:
        """
        Read the control file and resolve every recognised path line.
        Raises:
            FileOpenError: If the control file cannot be opened
        """
        control_file = self.config.control_file
        logger.info("Resolving input files from control file: %s", control_file)
        try:
            with open(control_file, 'r', encoding=self.config.encoding, errors='replace') as f:
                lines = [line.rstrip('\r\n') for line in f]
        except OSError as e:
            raise FileOpenError(control_file, e.strerror or str(e)) from e
        result = ResolvedInputFiles()
        for line in lines:
            self._resolve_line(line, result)
        logger.info("Resolved %d of %d input file roles (%d diagnostics)",
                    len(result.ROLES) - len(result.missing_roles()), len(result.ROLES),
                    len(result.diagnostics))
        return result

    # --- Line handling ---
    def _resolve_line(self, line: str, result: ResolvedInputFiles) -> None:
        if not self._is_path_line(line):
            return
        role = self._match_role(line)
        if role is None:
            message = ControlFileConstants.UNSUPPORTED_FILE_MESSAGE.format(line=line)
            logger.error(message)
            result.diagnostics.append(message)
            return
        local_path = self._locate(line)
        if local_path is None:
            result.diagnostics.append(str(MissingFileError(role, line)))
            return
        logger.debug("Resolved %s file: %s", role, local_path)
        setattr(result, role, local_path)

    def _is_path_line(self, line: str) -> bool:
        if not line:
            return False
        if self.config.drive_letter is not None:
            return line[0] == self.config.drive_letter
        return PureWindowsPath(line).is_absolute() or PurePosixPath(line).is_absolute()

    @staticmethod
    def _match_role(line: str) -> Optional[str]:
        for extension, role in ControlFileConstants.ROLE_EXTENSIONS:
            if extension in line:
                return role
        return None

    def _locate(self, line: str) -> Optional[Path]:
        """Returns the local path of the file named after the input folder segment, if it exists."""
        file_name = extract_file_name(line, self.config.input_folder.name)
        if not file_name:
            return None
        local_path = self.config.input_folder / file_name
        return local_path if local_path.is_file() else None


def extract_file_name(path_line: str, folder_name: str) -> str:
    """
    Returns the part of ``path_line`` after its last segment equal to ``folder_name``.

    Both backslash and slash separators are accepted; the result uses '/'.
    An empty string is returned when the folder does not appear in the path.
    Example:
        extract_file_name('C:/work/seamInputFiles/plate.mat', 'seamInputFiles') -> 'plate.mat'
    """
    segments = _PATH_SEPARATOR.split(path_line.strip())
    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == folder_name:
            return '/'.join(segments[index + 1:])
    return ''
