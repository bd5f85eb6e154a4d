"""Constants naming control file roles and run configuration keys."""

# Control file roles
MATERIAL_ROLE = "material"
SUBSYSTEM_ROLE = "subsystem"
JUNCTION_ROLE = "junction"
EXCITATION_ROLE = "excitation"
PARAMETER_ROLE = "parameter"

# Report labels used by the driver, in role order
ROLE_LABELS = {
    MATERIAL_ROLE: "MAT",
    SUBSYSTEM_ROLE: "SUB",
    JUNCTION_ROLE: "JNC",
    EXCITATION_ROLE: "EXC",
    PARAMETER_ROLE: "PAR",
}

# Run configuration keys
INPUT_FOLDER_KEY = "input_folder"
DRIVE_LETTER_KEY = "drive_letter"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
