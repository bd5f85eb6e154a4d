import logging
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class MaterialType(Enum):
    """
    Material type vocabulary of the REV 3.0 material file.

    Each member carries a description, the ordered MP1..MPn field names of its
    record and the number of leading fields that are not optional.
    """
    ISOELASTIC = ("linear, temperature-independent isotropic material",
                  ('RHO', 'E', 'G', 'NU', 'ETA', 'DAMP_EXP'), 4)
    GAS = ("gas",
           ('RHO', 'C', 'ETA', 'ALPHA', 'DAMP_EXP', 'ABS_EXP'), 3)
    LIQUID = ("liquid or fluid",
              ('RHO', 'C', 'ETA', 'ALPHA', 'DAMP_EXP', 'ABS_EXP'), 3)
    SOLIDWAVE = ("isotropic material with known longitudinal and shear wavespeeds",
                 ('RHO', 'C_LONG', 'C_SHEAR', 'ETA', 'DAMP_EXP'), 4)
    FIBER = ("porous material for acoustic absorption and noise control",
             ('RHO', 'FIB_TYPE', 'RHO_GAS', 'C_GAS', 'R_FLOW', 'D'), 4)
    FIBERZ = ("porous material with known characteristic impedance and propagation constant",
              ('RHO', 'RE_Z', '-IM_Z', 'RE_B/OMEGA', 'IM_B/OMEGA'), 5)

    def __init__(self, description: str, field_names: Tuple[str, ...], required_count: int):
        self.description = description
        self.field_names = field_names
        # ISOELASTIC ETA may be a '#<table>' reference, which ends numeric parsing
        self.required_count = required_count

    @property
    def max_count(self) -> int:
        return len(self.field_names)

    @classmethod
    def from_tag(cls, tag: str) -> Optional['MaterialType']:
        """Look up a type token case-insensitively, returning None when it is not in the vocabulary."""
        if not tag:
            return None
        return cls.__members__.get(tag.strip().upper())


def property_field_names(material_type: str, count: int) -> Tuple[str, ...]:
    """
    Returns field names for the first ``count`` properties of a record.

    Positions beyond the schema (or all positions for an unknown type)
    are named MP1, MP2, ...
    """
    known = MaterialType.from_tag(material_type)
    schema = known.field_names if known else ()
    return tuple(schema[i] if i < len(schema) else f"MP{i + 1}" for i in range(count))


def check_property_count(material_type: str, count: int) -> bool:
    """
    Check whether a property count fits the documented schema of a type.

    Unknown types are never a fit. The parser itself does not call this;
    it is a diagnostic for callers.
    """
    known = MaterialType.from_tag(material_type)
    if known is None:
        logger.debug("No schema for material type '%s'", material_type)
        return False
    fits = known.required_count <= count <= known.max_count
    if not fits:
        logger.debug("Material type %s expects %d-%d properties, got %d",
                     known.name, known.required_count, known.max_count, count)
    return fits
