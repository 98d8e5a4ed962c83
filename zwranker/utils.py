# zwranker/utils.py — Shared utility functions
import re

import numpy as np

_SHEET_BAD_CHARS = re.compile(r"[\[\]:*?/\\]")


def _safe(val, default=np.nan):
    """Safely convert value to float, returning default for None/NaN/non-numeric."""
    if val is None:
        return default
    try:
        f = float(val)
        return default if np.isnan(f) else f
    except Exception:
        return default


def _sheet_name(name: str, used: set = None) -> str:
    """Excel sheet title: max 31 chars, no []:*?/\\, unique within *used*.

    *used* holds the lower-cased titles already taken (Excel compares
    sheet names case-insensitively); a clash gets a numeric suffix.
    """
    cleaned = (_SHEET_BAD_CHARS.sub("_", str(name)).strip("'") or "_")[:31]
    if used is None:
        return cleaned
    candidate = cleaned
    for i in range(1, 1000):
        if candidate.lower() not in used:
            break
        candidate = f"{cleaned[:28]}_{i}"[:31]
    used.add(candidate.lower())
    return candidate


def _is_blank_col(name) -> bool:
    # empty header fields, e.g. from a trailing separator
    name = str(name).strip()
    return not name or name.startswith("Unnamed:")


def _first_line(path: str, encoding: str = "utf-8") -> str:
    with open(path, encoding=encoding) as f:
        return f.readline()
