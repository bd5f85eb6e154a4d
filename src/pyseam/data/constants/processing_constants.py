from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class FileConstants:
    """File handling constants and the default input-folder convention."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    INPUT_FOLDER: Final[str] = 'seamInputFiles'
    CONTROL_FILE_NAME: Final[str] = 'seam.in'
    DRIVE_LETTER: Final[str] = 'C'


@dataclass(frozen=True)
class ParsingConstants:
    """Constants used by the material file parser."""
    COMMENT_MARKER: Final[str] = '!'
    BLOCK_OPEN_MARKER: Final[str] = '('
    BLOCK_CLOSE_MARKER: Final[str] = ')'
    # Sub-blocks whose interior lines are skipped entirely
    OPAQUE_BLOCK_NAMES: Final[tuple] = ('FREQVAL',)
    # Commas and whitespace both separate fields
    FIELD_SEPARATOR_REGEX: Final[str] = r'[\s,]+'
    NUMERIC_TOKEN_REGEX: Final[str] = r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$'


@dataclass(frozen=True)
class ControlFileConstants:
    """Extension to role table for control file entries, checked in order."""
    ROLE_EXTENSIONS: Final[tuple] = (
        ('.mat', 'material'),
        ('.sub', 'subsystem'),
        ('.jun', 'junction'),
        ('.exc', 'excitation'),
        ('.par', 'parameter'),
    )
    UNSUPPORTED_FILE_MESSAGE: Final[str] = "File does not exist or unsupported file type - {line}"
