# zwranker/__init__.py — Breeding-value Top-N report package
#
# Reads one delimited file per breed, ranks every trait (Zuchtwert) per
# breed, keeps the top N animals and writes one Excel sheet per trait.
# Import anything directly: `from zwranker import run_pipeline, CFG`
#
# Module layout:
#   config.py        — CFG, non-trait columns, trait name overrides, BreedSpec
#   errors.py        — ConfigurationError, SourceReadError, DestinationWriteError
#   utils.py         — _safe(), _sheet_name() shared helpers
#   traits.py        — Trait discovery from file headers
#   names.py         — TraitNames (abbreviation → display name, Abk/Name file)
#   extract.py       — Top-N extraction per breed and trait, ABSENT marker
#   aggregate.py     — Breed × trait orchestration
#   export_excel.py  — Excel report + formatting
#   summary.py       — Console summary output
#   pipeline.py      — Main orchestration (run_pipeline)

__version__ = "1.0"

from zwranker.config import CFG, NON_TRAIT_COLS, DESCRIPTIVE_COLS, BreedSpec, build_breed_specs
from zwranker.errors import ConfigurationError, SourceReadError, DestinationWriteError
from zwranker.traits import discover_traits
from zwranker.names import TraitNames
from zwranker.extract import ABSENT, Absent, extract, is_absent
from zwranker.aggregate import aggregate, load_table
from zwranker.export_excel import write_report, block_layout
from zwranker.pipeline import run_pipeline
