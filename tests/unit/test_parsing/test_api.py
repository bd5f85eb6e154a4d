"""Tests for the main API module."""

import tempfile
from pathlib import Path

import pytest

from pyseam.core.exceptions import FileOpenError, MaterialNotFoundError
from pyseam.core.materials import MaterialRecord, MaterialStore
from pyseam.parsing.api import (
    format_materials, get_material_info, load_materials, query_material, resolve_input_files
)


class TestLoadMaterials:
    """Test the load_materials entry point."""

    def test_load_and_query(self):
        """Test a record round trip through a material file."""
        content = "1011 ISOELASTIC steel\n7.85e-6 2.07e8 8.0e7 0.3\n"
        with tempfile.NamedTemporaryFile(mode='w', suffix='.mat', delete=False) as f:
            f.write(content)
            mat_path = Path(f.name)
        try:
            store = load_materials(mat_path)
            record = query_material(store, "1011")
            assert record == MaterialRecord("1011", "ISOELASTIC", [7.85e-6, 2.07e8, 8.0e7, 0.3])
        finally:
            mat_path.unlink()

    def test_query_accepts_integer_id(self, write_mat_file, steel_record_text):
        store = load_materials(write_mat_file(steel_record_text))
        assert query_material(store, 1011).material_id == "1011"

    def test_query_missing(self, write_mat_file, steel_record_text):
        store = load_materials(write_mat_file(steel_record_text))
        with pytest.raises(MaterialNotFoundError, match="Available materials: 1011"):
            query_material(store, "9999")

    def test_load_missing_file(self):
        """Test error handling for missing files."""
        with pytest.raises(FileOpenError):
            load_materials("nonexistent.mat")

    def test_load_missing_file_keeps_store(self):
        store = MaterialStore()
        store.add(MaterialRecord("1", "GAS", [1.0, 2.0, 3.0]))
        with pytest.raises(FileOpenError):
            load_materials("nonexistent.mat", store=store)
        assert len(store) == 1

    def test_load_accepts_string_path(self, write_mat_file, steel_record_text):
        store = load_materials(str(write_mat_file(steel_record_text)))
        assert "1011" in store


class TestFormatMaterials:
    """Test the diagnostic listing."""

    def test_format(self, write_mat_file):
        store = load_materials(write_mat_file("2 GAS\n1.21e-9 3.43e5 0.01\n1 LIQUID\n1.0e-6 1.48e6 0.001\n"))
        text = format_materials(store)
        assert text == ("Material ID: 1\nType: LIQUID\nProperties: 1e-06 1.48e+06 0.001\n\n"
                        "Material ID: 2\nType: GAS\nProperties: 1.21e-09 343000 0.01\n\n")


class TestGetMaterialInfo:
    """Test material file summaries."""

    def test_example_file_summary(self, example_mat_path):
        info = get_material_info(example_mat_path)
        assert info['total_materials'] == 7
        assert info['material_types']['ISOELASTIC'] == 2
        assert info['unknown_types'] == []
        assert info['unexpected_property_counts'] == []

    def test_flags_unknown_types_and_counts(self, write_mat_file):
        info = get_material_info(write_mat_file("1 PLASMA\n1.0\n2 GAS\n1.0\n"))
        assert info['unknown_types'] == ['PLASMA']
        assert info['unexpected_property_counts'] == ['2']


class TestResolveInputFiles:
    """Test the control file API wrapper."""

    def test_resolve_with_folder_override(self, seam_input_folder):
        (seam_input_folder / "plate.mat").write_text("")
        (seam_input_folder / "seam.in").write_text("C:\\SEAM\\seamInputFiles\\plate.mat\n")
        files = resolve_input_files(input_folder=seam_input_folder)
        assert files.material == seam_input_folder / "plate.mat"

    def test_resolve_missing_control_file(self, tmp_path):
        with pytest.raises(FileOpenError):
            resolve_input_files(input_folder=tmp_path, control_file_name="absent.in")
