"""Example SEAM input files."""

# seamInputFiles/ holds a control file (seam.in) and the material file it
# references (panel.mat). They are data files, loaded with
# pyseam.resolve_input_files / pyseam.load_materials rather than imported.

__all__ = []
