# zwranker/traits.py — Trait discovery from breed file headers
import pandas as pd

from zwranker.errors import ConfigurationError
from zwranker.utils import _first_line, _is_blank_col


def read_header(path: str, sep: str = ";", encoding: str = "utf-8") -> list:
    """Column names of the first line of *path*, without reading any data rows.

    Empty fields (trailing separator) are dropped; a blank first line is an
    error rather than a cue to use the next line.
    """
    try:
        if not _first_line(path, encoding).strip():
            raise ConfigurationError(f"Empty header line in {path}")
        header = pd.read_csv(path, sep=sep, encoding=encoding, nrows=0)
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ConfigurationError(f"Cannot read header of {path}: {e}") from e
    cols = [str(c).strip() for c in header.columns if not _is_blank_col(c)]
    if not cols:
        raise ConfigurationError(f"Empty header line in {path}")
    return cols


def discover_traits(paths, non_trait_cols, sep: str = ";", encoding: str = "utf-8") -> list:
    """Union of all header columns across *paths*, minus the non-trait columns.

    Order is first-seen order walking the files left to right, so traits
    that only one breed carries are kept and sheet order is reproducible.
    """
    excluded = set(non_trait_cols)
    traits, seen = [], set()
    for path in paths:
        for col in read_header(path, sep=sep, encoding=encoding):
            if col in excluded or col in seen:
                continue
            seen.add(col)
            traits.append(col)
    return traits
