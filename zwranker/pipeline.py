# zwranker/pipeline.py — Main orchestration
import os
from datetime import datetime

from zwranker.config import CFG, NON_TRAIT_COLS, DESCRIPTIVE_COLS, TRAIT_NAMES, build_breed_specs
from zwranker.errors import ConfigurationError
from zwranker.traits import discover_traits
from zwranker.names import TraitNames
from zwranker.aggregate import aggregate
from zwranker.export_excel import write_report
from zwranker.summary import _print_summary


def build_trait_names(trait_ids, names_file: str = None) -> TraitNames:
    """Identity names, then TRAIT_NAMES, then the hand-edited names file if present.

    When no names file exists yet, the resulting mapping is written there
    once so it can be edited for the next run.
    """
    names = TraitNames.build_default(trait_ids)
    names.update({k: v for k, v in TRAIT_NAMES.items() if k in names})
    if names_file:
        if os.path.exists(names_file):
            names.load(names_file)
        else:
            names.save(names_file)
    return names


def run_pipeline(cfg: dict = None) -> dict:
    cfg = {**CFG, **(cfg or {})}

    print("=" * 65)
    print("  ZUCHTWERT TOP-N REPORT")
    print(f"  {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print("=" * 65)

    # 1. Configuration
    specs = build_breed_specs(cfg["breeds"], cfg["files"], cfg["top_n"])
    non_trait = cfg.get("non_trait_cols", NON_TRAIT_COLS)
    descriptive = cfg.get("descriptive_cols", DESCRIPTIVE_COLS)

    # 2. Traits
    if cfg.get("traits"):
        trait_ids = [t for t in dict.fromkeys(cfg["traits"]) if t not in set(non_trait)]
        print(f"\n[1/4]  Traits from configuration: {len(trait_ids)}")
    else:
        print(f"\n[1/4]  Discovering traits ({len(specs)} files)...")
        trait_ids = discover_traits([s.path for s in specs], non_trait,
                                    sep=cfg["sep"], encoding=cfg["encoding"])
    if not trait_ids:
        raise ConfigurationError("No trait columns found")
    print(f"  {', '.join(trait_ids)}")

    # 3. Names
    print("\n[2/4]  Trait names...")
    names = build_trait_names(trait_ids, cfg.get("names_file"))

    # 4. Rankings
    print("\n[3/4]  Top-N per breed and trait...")
    results = aggregate(specs, trait_ids, descriptive, names,
                        sep=cfg["sep"], encoding=cfg["encoding"], decimal=cfg["decimal"])
    _print_summary(results, trait_ids, names)

    # 5. Output
    print("\n[4/4]  Exporting Excel...")
    write_report(results, trait_ids, [s.breed for s in specs], cfg["output_file"], names)

    print("\n✅  DONE!")
    return results
