import logging
from dataclasses import dataclass, fields, replace
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ruamel.yaml import YAML, constructor, error

from pyseam.data.constants import FileConstants
from pyseam.parsing.config.file_keys import INPUT_FOLDER_KEY, DRIVE_LETTER_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """
    Settings for locating SEAM input files.

    Attributes:
        input_folder: Folder holding the control file and the referenced input files.
        control_file_name: Name of the control file inside ``input_folder``.
        drive_letter: First character that marks a control file line as a path.
            ``None`` accepts any absolute path instead.
        encoding: Text encoding of all input files.
    """
    input_folder: Path = Path(FileConstants.INPUT_FOLDER)
    control_file_name: str = FileConstants.CONTROL_FILE_NAME
    drive_letter: Optional[str] = FileConstants.DRIVE_LETTER
    encoding: str = FileConstants.DEFAULT_ENCODING

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'input_folder', Path(self.input_folder))
        if self.drive_letter is not None and len(self.drive_letter) != 1:
            raise ValueError(f"drive_letter must be a single character or null, got '{self.drive_letter}'")

    @property
    def control_file(self) -> Path:
        return self.input_folder / self.control_file_name

    def with_overrides(self, **overrides: Any) -> 'RunConfig':
        """Returns a copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_run_config(config_path: Union[str, Path]) -> RunConfig:
    """
    Load a RunConfig from a YAML file.

    Relative ``input_folder`` values are resolved against the YAML file's directory.
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid or holds unknown keys
    """
    config_path = Path(config_path)
    yaml = YAML(typ='safe')
    yaml.allow_duplicate_keys = False
    try:
        logger.debug("Loading run configuration: %s", config_path)
        with open(config_path, 'r') as f:
            data = yaml.load(f)
    except FileNotFoundError as e:
        logger.error("Run configuration not found: %s", config_path)
        raise FileNotFoundError(f"Run configuration not found: {config_path}") from e
    except (constructor.DuplicateKeyError, error.YAMLError) as e:
        logger.error("YAML error in run configuration %s: %s", config_path, e)
        raise ValueError(f"YAML error in {config_path}: {str(e)}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Run configuration {config_path} must be a mapping, not {type(data).__name__}")
    _validate_keys(data)
    input_folder = data.get(INPUT_FOLDER_KEY)
    if input_folder is not None and not Path(input_folder).is_absolute():
        data[INPUT_FOLDER_KEY] = config_path.parent / input_folder
    config = RunConfig().with_overrides(**data)
    if DRIVE_LETTER_KEY in data and data[DRIVE_LETTER_KEY] is None:
        config = replace(config, drive_letter=None)
    logger.info("Loaded run configuration from %s: input folder %s", config_path, config.input_folder)
    return config


def _validate_keys(data: Dict[str, Any]) -> None:
    valid_keys = {f.name for f in fields(RunConfig)}
    extra_keys = set(data) - valid_keys
    if extra_keys:
        logger.warning("Unknown keys in run configuration: %s", extra_keys)
        error_msg = "Unknown keys in run configuration: \n ->"
        for key in sorted(extra_keys, key=str):
            matches = get_close_matches(str(key), valid_keys, n=1, cutoff=0.6)
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            error_msg += f" - '{key}'{suggestion}\n"
        raise ValueError(error_msg)
