# zwranker/extract.py — Top-N extraction for one breed and one trait
import pandas as pd

from zwranker.config import RANK_COL
from zwranker.utils import _safe


class Absent:
    """Marker for "this breed has no column for this trait".

    Distinct from an empty result table, which means the trait column exists
    but the file has no rows.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"


ABSENT = Absent()


def is_absent(result) -> bool:
    return result is ABSENT


def sort_key(values: pd.Series) -> pd.Series:
    """Numeric sort key: anything that is not a number becomes NaN (sorts last)."""
    return values.map(_safe).astype(float)


def extract(table: pd.DataFrame, trait: str, descriptive_cols, top_n: int,
            names=None):
    """Rank *table* by *trait* and return the best *top_n* rows.

    Result columns are ``Rank``, the descriptive columns present in *table*
    and the trait column renamed to its display name. Ties keep file order.
    Returns ABSENT when *table* has no *trait* column.
    """
    if trait not in table.columns:
        return ABSENT

    key = sort_key(table[trait]).reset_index(drop=True)
    order = key.sort_values(ascending=False, kind="mergesort", na_position="last").index
    cols = [c for c in descriptive_cols if c in table.columns and c != trait] + [trait]

    out = table.iloc[order[:max(top_n, 0)]][cols].reset_index(drop=True)
    label = names.lookup(trait) if names is not None else trait
    out = out.rename(columns={trait: label})
    # a trait may itself be called "Rank"
    out.insert(0, RANK_COL, range(1, len(out) + 1), allow_duplicates=True)
    return out
