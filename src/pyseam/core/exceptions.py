"""Custom exceptions for pyseam input handling."""
import logging

logger = logging.getLogger(__name__)


class SeamInputError(Exception):
    """Base exception for all SEAM input errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("SeamInputError raised: %s", message)


class FileOpenError(SeamInputError):
    """Exception raised when an input file cannot be opened for reading."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Failed to open file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingFileError(SeamInputError):
    """A control file entry points at a file that does not exist."""

    def __init__(self, role: str, line: str):
        self.role = role
        self.line = line
        super().__init__(f"{role.upper()} file does not exist - {line}")


class MaterialNotFoundError(SeamInputError, KeyError):
    """Exception raised when a material id is not present in a store."""

    def __init__(self, material_id: str, available_ids=None):
        self.material_id = material_id
        self.available_ids = list(available_ids or [])
        message = f"Material '{material_id}' not found"
        if self.available_ids:
            message += f". Available materials: {', '.join(self.available_ids)}"
        super().__init__(message)

    def __str__(self):
        # KeyError would otherwise render the message with quotes
        return self.args[0]
