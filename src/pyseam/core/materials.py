import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

import numpy as np
import pandas as pd

from pyseam.core.exceptions import MaterialNotFoundError
from pyseam.core.material_types import check_property_count, property_field_names

logger = logging.getLogger(__name__)


@dataclass
class MaterialRecord:
    """
    One material entry of a SEAM material file.

    Properties are stored positionally (MP1..MPn) exactly as read; the
    count is not checked against the material type.
    """
    material_id: str
    material_type: str
    properties: List[float] = field(default_factory=list)

    def as_array(self) -> np.ndarray:
        """Returns the properties as a float64 array."""
        return np.asarray(self.properties, dtype=np.float64)

    def named_properties(self) -> Dict[str, float]:
        """Maps schema field names (MP<n> where unknown) to property values."""
        names = property_field_names(self.material_type, len(self.properties))
        return OrderedDict(zip(names, self.properties))

    def has_expected_property_count(self) -> bool:
        return check_property_count(self.material_type, len(self.properties))

    def format(self) -> str:
        props = " ".join(f"{prop:g}" for prop in self.properties)
        return f"Material ID: {self.material_id}\nType: {self.material_type}\nProperties: {props}\n"


class MaterialStore:
    """Collection of material records keyed by material id (last write wins)."""

    def __init__(self) -> None:
        self._records: Dict[str, MaterialRecord] = {}

    # --- Mapping protocol ---
    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, material_id) -> bool:
        return material_id in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __getitem__(self, material_id: str) -> MaterialRecord:
        return self.query(material_id)

    def __repr__(self) -> str:
        return f"MaterialStore({len(self)} materials)"

    # --- Public API ---
    def add(self, record: MaterialRecord) -> MaterialRecord:
        if record.material_id in self._records:
            logger.debug("Replacing material '%s' (type %s -> %s)", record.material_id,
                         self._records[record.material_id].material_type, record.material_type)
        self._records[record.material_id] = record
        return record

    def update(self, other: 'MaterialStore') -> None:
        """Merges records from another store, replacing records with the same id."""
        for record in other.records():
            self.add(record)

    def query(self, material_id: str) -> MaterialRecord:
        try:
            return self._records[material_id]
        except KeyError:
            raise MaterialNotFoundError(material_id, sorted(self._records)) from None

    def get(self, material_id: str, default: Optional[MaterialRecord] = None) -> Optional[MaterialRecord]:
        return self._records.get(material_id, default)

    def ids(self) -> List[str]:
        return sorted(self._records)

    def records(self) -> List[MaterialRecord]:
        """Returns the records ordered by material id."""
        return [self._records[material_id] for material_id in self.ids()]

    def format(self) -> str:
        """Renders every record as id, type and space-separated properties, ordered by id."""
        return "".join(record.format() + "\n" for record in self.records())

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view of the store.
        Returns:
            DataFrame with columns material_id, material_type, MP1..MPk where k is
            the longest property list; shorter rows are padded with NaN.
        """
        width = max((len(record.properties) for record in self.records()), default=0)
        columns = ['material_id', 'material_type'] + [f"MP{i + 1}" for i in range(width)]
        rows = []
        for record in self.records():
            padded = np.full(width, np.nan)
            padded[:len(record.properties)] = record.as_array()
            rows.append([record.material_id, record.material_type, *padded])
        return pd.DataFrame(rows, columns=columns)
