# zwranker/aggregate.py — Breed × trait orchestration
import pandas as pd

from zwranker.errors import SourceReadError
from zwranker.extract import extract, is_absent
from zwranker.utils import _first_line, _is_blank_col


def load_table(spec, sep: str = ";", encoding: str = "utf-8", decimal: str = ".") -> pd.DataFrame:
    try:
        if not _first_line(spec.path, encoding).strip():
            raise ValueError("empty header line")
        # index_col=False: rows with a trailing separator keep their first column
        df = pd.read_csv(spec.path, sep=sep, encoding=encoding, decimal=decimal, index_col=False)
    except (OSError, ValueError) as e:
        raise SourceReadError(spec.breed, spec.path, e) from e
    df.columns = [str(c).strip() for c in df.columns]
    return df.loc[:, [not _is_blank_col(c) for c in df.columns]]


def aggregate(specs, trait_ids, descriptive_cols, names=None,
              sep: str = ";", encoding: str = "utf-8", decimal: str = ".") -> dict:
    """Top-N tables for every breed and trait: ``{breed: {trait: DataFrame | ABSENT}}``.

    Breeds and traits keep their declared order. Any unreadable breed file
    aborts the whole run.
    """
    results = {}
    for spec in specs:
        table = load_table(spec, sep=sep, encoding=encoding, decimal=decimal)
        per_trait = {}
        for trait in trait_ids:
            per_trait[trait] = extract(table, trait, descriptive_cols, spec.top_n, names)
        n_present = sum(1 for r in per_trait.values() if not is_absent(r))
        print(f"  {spec.breed}: {len(table)} rows, {n_present}/{len(trait_ids)} traits "
              f"(top {spec.top_n})")
        results[spec.breed] = per_trait
    return results
