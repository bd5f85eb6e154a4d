"""Tests for material records and the material store."""

import math

import numpy as np
import pandas as pd
import pytest

from pyseam.core.exceptions import MaterialNotFoundError
from pyseam.core.materials import MaterialRecord, MaterialStore


@pytest.fixture
def store():
    store = MaterialStore()
    store.add(MaterialRecord("1011", "ISOELASTIC", [7.85e-6, 2.07e8, 8.0e7, 0.3]))
    store.add(MaterialRecord("2001", "GAS", [1.21e-9, 3.43e5, 0.01]))
    return store


class TestMaterialRecord:
    """Test MaterialRecord helpers."""

    def test_default_properties_empty(self):
        record = MaterialRecord("7", "GAS")
        assert record.properties == []

    def test_as_array(self):
        record = MaterialRecord("1011", "ISOELASTIC", [7.85e-6, 2.07e8])
        array = record.as_array()
        assert isinstance(array, np.ndarray)
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array, [7.85e-6, 2.07e8])

    def test_named_properties_uses_schema(self):
        record = MaterialRecord("1011", "ISOELASTIC", [7.85e-6, 2.07e8, 8.0e7, 0.3])
        named = record.named_properties()
        assert list(named) == ['RHO', 'E', 'G', 'NU']
        assert named['NU'] == 0.3

    def test_named_properties_unknown_type(self):
        record = MaterialRecord("9", "PLASMA", [1.0, 2.0])
        assert list(record.named_properties()) == ['MP1', 'MP2']

    def test_expected_property_count(self):
        assert MaterialRecord("1", "GAS", [1.0, 2.0, 3.0]).has_expected_property_count()
        assert not MaterialRecord("1", "GAS", [1.0, 2.0]).has_expected_property_count()

    def test_format(self):
        record = MaterialRecord("1011", "ISOELASTIC", [7.85e-6, 2.07e8, 8.0e7, 0.3])
        assert record.format() == "Material ID: 1011\nType: ISOELASTIC\nProperties: 7.85e-06 2.07e+08 8e+07 0.3\n"


class TestMaterialStore:
    """Test MaterialStore behaviour."""

    def test_query(self, store):
        record = store.query("1011")
        assert record.material_type == "ISOELASTIC"
        assert store["2001"].material_type == "GAS"

    def test_query_missing_raises(self, store):
        with pytest.raises(MaterialNotFoundError, match="Material '42' not found"):
            store.query("42")

    def test_query_missing_is_key_error(self, store):
        with pytest.raises(KeyError):
            store["42"]

    def test_get_default(self, store):
        assert store.get("42") is None
        assert store.get("1011").material_id == "1011"

    def test_last_write_wins(self, store):
        store.add(MaterialRecord("1011", "SOLIDWAVE", [1.0]))
        assert len(store) == 2
        assert store.query("1011").material_type == "SOLIDWAVE"
        assert store.query("1011").properties == [1.0]

    def test_mapping_protocol(self, store):
        assert "1011" in store
        assert "42" not in store
        assert sorted(store) == ["1011", "2001"]
        assert len(store) == 2

    def test_update_merges(self, store):
        other = MaterialStore()
        other.add(MaterialRecord("2001", "LIQUID", [1.0e-6]))
        other.add(MaterialRecord("3001", "SOLIDWAVE", [2.3e-6]))
        store.update(other)
        assert store.ids() == ["1011", "2001", "3001"]
        assert store.query("2001").material_type == "LIQUID"

    def test_records_ordered_by_id(self):
        store = MaterialStore()
        for material_id in ("30", "100", "2"):
            store.add(MaterialRecord(material_id, "GAS"))
        assert [r.material_id for r in store.records()] == ["100", "2", "30"]

    def test_format_is_deterministic(self, store):
        expected = ("Material ID: 1011\nType: ISOELASTIC\nProperties: 7.85e-06 2.07e+08 8e+07 0.3\n\n"
                    "Material ID: 2001\nType: GAS\nProperties: 1.21e-09 343000 0.01\n\n")
        assert store.format() == expected

    def test_format_empty_store(self):
        assert MaterialStore().format() == ""

    def test_to_dataframe_pads_with_nan(self, store):
        df = store.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['material_id', 'material_type', 'MP1', 'MP2', 'MP3', 'MP4']
        gas = df[df['material_id'] == '2001'].iloc[0]
        assert gas['MP3'] == 0.01
        assert math.isnan(gas['MP4'])

    def test_to_dataframe_empty(self):
        df = MaterialStore().to_dataframe()
        assert df.empty
        assert list(df.columns) == ['material_id', 'material_type']
