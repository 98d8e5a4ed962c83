# zwranker/summary.py — Console summary output
import pandas as pd

from zwranker.extract import ABSENT, is_absent


def _print_summary(results: dict, trait_ids, names=None):
    print("\n" + "=" * 65)
    print("  TOP-N ROWS PER TRAIT AND BREED")
    print("=" * 65)
    breeds = list(results)
    rows = []
    for trait in trait_ids:
        row = {"Trait": trait,
               "Name": names.lookup(trait) if names is not None else trait}
        for breed in breeds:
            table = results[breed].get(trait, ABSENT)
            row[breed] = "–" if is_absent(table) else len(table)
        rows.append(row)
    if rows:
        print(pd.DataFrame(rows, columns=["Trait", "Name"] + breeds).to_string(index=False))

    only_one = [t for t in trait_ids
                if sum(1 for b in breeds if not is_absent(results[b].get(t, ABSENT))) == 1]
    if only_one and len(breeds) > 1:
        print(f"\n  ℹ️  Traits carried by a single breed: {', '.join(only_one)}")
