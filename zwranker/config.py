# zwranker/config.py — Configuration, column sets, trait names, breed specs
from typing import NamedTuple

from zwranker.errors import ConfigurationError

# ════════════════════════════════════════════════════════════
#  CONFIGURATION
# ════════════════════════════════════════════════════════════
CFG = {
    # One entry per breed; the three lists are matched by position.
    "breeds":      ["BV", "OB"],
    "files":       ["data/BV.csv", "data/OB.csv"],
    "top_n":       [20, 10],
    "sep":         ";",
    "encoding":    "utf-8",
    "decimal":     ".",
    "traits":      None,              # None → discover from file headers
    "names_file":  "data/trait_names.csv",
    "output_file": "artifacts/zw_topliste.xlsx",
}

# ════════════════════════════════════════════════════════════
#  COLUMNS
# ════════════════════════════════════════════════════════════
PROVIDER_COL = "Anbieter"

# Identifier columns, never ranked
NON_TRAIT_COLS = ["Name", "RegNr", PROVIDER_COL]

# Carried into every result table (provider is dropped)
DESCRIPTIVE_COLS = [c for c in NON_TRAIT_COLS if c != PROVIDER_COL]

RANK_COL = "Rank"

# Display names applied over the identity default
TRAIT_NAMES = {
    "GZW": "Gesamtzuchtwert",
    "MIW": "Milchwert",
    "FIW": "Fitnesswert",
    "ND":  "Nutzungsdauer",
    "LBE": "Laktationsbeständigkeit",
    "ZZ":  "Zellzahl",
    "FRU": "Fruchtbarkeit",
    "MV":  "Melkbarkeit",
    "EXT": "Exterieur",
    "FW":  "Fleischwert",
}


# ════════════════════════════════════════════════════════════
#  BREED SPECS
# ════════════════════════════════════════════════════════════

class BreedSpec(NamedTuple):
    breed: str
    path:  str
    top_n: int


def build_breed_specs(breeds, files, top_ns) -> list:
    """Match the breed, file and top-N lists into BreedSpecs.

    Raises ConfigurationError for unequal list lengths, duplicate breeds or
    a top-N that is not a non-negative integer.
    """
    breeds, files, top_ns = list(breeds), list(files), list(top_ns)
    if not (len(breeds) == len(files) == len(top_ns)):
        raise ConfigurationError(
            f"breeds/files/top_n length mismatch: "
            f"{len(breeds)}/{len(files)}/{len(top_ns)}")
    if not breeds:
        raise ConfigurationError("No breeds configured")

    seen = set()
    specs = []
    for breed, path, top_n in zip(breeds, files, top_ns):
        if breed in seen:
            raise ConfigurationError(f"Duplicate breed '{breed}'")
        seen.add(breed)
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
            raise ConfigurationError(f"Invalid top_n for breed '{breed}': {top_n!r}")
        specs.append(BreedSpec(str(breed), str(path), top_n))
    return specs
