# zwranker/names.py — Trait abbreviation → display name mapping
import os

import pandas as pd

from zwranker.errors import ConfigurationError

ABK_COL  = "Abk"
NAME_COL = "Name"


class TraitNames:
    """Display names keyed by trait abbreviation.

    Unmapped abbreviations are shown as themselves. The mapping can be kept
    in a two-column CSV (``Abk,Name``) so names can be edited by hand; that
    file is never overwritten once it exists.
    """

    def __init__(self, mapping: dict = None):
        self._names = dict(mapping or {})

    @classmethod
    def build_default(cls, trait_ids) -> "TraitNames":
        return cls({t: t for t in trait_ids})

    def override(self, abk: str, name: str):
        self._names[abk] = name

    def update(self, mapping: dict):
        for abk, name in mapping.items():
            self.override(abk, name)

    def lookup(self, abk: str) -> str:
        return self._names.get(abk, abk)

    def as_dict(self) -> dict:
        return dict(self._names)

    def __contains__(self, abk):
        return abk in self._names

    def __len__(self):
        return len(self._names)

    def load(self, path: str) -> "TraitNames":
        """Apply every row of an ``Abk,Name`` file as an override."""
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise ConfigurationError(f"Cannot read trait names from {path}: {e}") from e
        missing = [c for c in (ABK_COL, NAME_COL) if c not in df.columns]
        if missing:
            raise ConfigurationError(f"Trait name file {path} lacks column(s) {missing}")
        for abk, name in zip(df[ABK_COL], df[NAME_COL]):
            if abk:
                self.override(abk, name or abk)
        print(f"✅  Trait names loaded ({len(df)}) ← {path}")
        return self

    def save(self, path: str) -> bool:
        """Write the mapping to *path* unless that file already exists.

        Returns False (and writes nothing) when the file is already there,
        so manual edits are kept.
        """
        if os.path.exists(path):
            print(f"  ℹ️  Trait name file exists, not overwritten → {path}")
            return False
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        pd.DataFrame(
            list(self._names.items()), columns=[ABK_COL, NAME_COL]
        ).to_csv(path, index=False)
        print(f"💾  Trait names saved → {path}")
        return True
