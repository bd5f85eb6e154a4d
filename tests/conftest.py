"""Shared pytest fixtures for pyseam tests."""
import pytest
from pathlib import Path


@pytest.fixture
def examples_dir():
    """Path to the bundled example input folder."""
    return Path(__file__).parent.parent / "src" / "pyseam" / "data" / "examples" / "seamInputFiles"


@pytest.fixture
def example_mat_path(examples_dir):
    """Path to the bundled example material file."""
    return examples_dir / "panel.mat"


@pytest.fixture
def write_mat_file(tmp_path):
    """Factory writing material file content to a temporary .mat file."""
    def _write(content: str, name: str = "test.mat") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def steel_record_text():
    """A formatted ISOELASTIC record."""
    return "1011 ISOELASTIC steel\n7.85e-6 2.07e8 8.0e7 0.3\n"


@pytest.fixture
def seam_input_folder(tmp_path):
    """Empty input folder named after the SEAM convention."""
    folder = tmp_path / "seamInputFiles"
    folder.mkdir()
    return folder
