"""Demonstration script for reading SEAM input files."""
import logging
from pathlib import Path

from pyseam import RunConfig, load_materials, resolve_input_files
from pyseam.parsing.api import get_material_info


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_material_file():
    """Resolve the example control file and list its materials."""
    setup_logging()
    current_file = Path(__file__)
    input_folder = current_file.parent.parent / "src" / "pyseam" / "data" / "examples" / "seamInputFiles"
    files = resolve_input_files(config=RunConfig(input_folder=input_folder))
    print(f"\n{'=' * 80}")
    for role, path in files.as_dict().items():
        print(f"{role:>10}: {path if path is not None else '(unresolved)'}")
    if files.material is None:
        raise FileNotFoundError(f"No material file resolved from {input_folder}")
    store = load_materials(files.material)
    for record in store.records():
        print(f"\n{'=' * 80}")
        print(f"MATERIAL: {record.material_id} ({record.material_type})")
        print(f"{'=' * 80}")
        for name, value in record.named_properties().items():
            print(f"  {name:<12} {value:g}")
    print(f"\n{'=' * 80}")
    print(store.to_dataframe().to_string(index=False))
    print(get_material_info(files.material))


if __name__ == "__main__":
    demonstrate_material_file()
