# zwranker/export_excel.py — Excel report + formatting
import os
import stat
import tempfile

import pandas as pd
from openpyxl.styles import PatternFill, Font, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from zwranker.errors import ConfigurationError, DestinationWriteError
from zwranker.extract import ABSENT, is_absent
from zwranker.utils import _sheet_name

# 0-based sheet rows
HEADING_ROW     = 0
FIRST_LABEL_ROW = 2
# label + header + blank row
BLOCK_OVERHEAD  = 3


def block_layout(results: dict, trait: str, breed_order) -> list:
    """``[(breed, label_row), ...]`` for the breeds that have *trait*.

    The table header sits on the row after the label and the next label
    follows one blank row after the last data row. Breeds without the trait
    take no space.
    """
    layout = []
    row = FIRST_LABEL_ROW
    for breed in breed_order:
        table = results.get(breed, {}).get(trait, ABSENT)
        if is_absent(table):
            continue
        layout.append((breed, row))
        row += len(table) + BLOCK_OVERHEAD
    return layout


def write_report(results: dict, trait_ids, breed_order, filepath: str, names=None):
    """One sheet per trait, one stacked block per breed.

    The workbook is built in a temporary file next to *filepath* and moved
    into place only once every sheet is written.
    """
    trait_ids = list(trait_ids)
    if not trait_ids:
        raise ConfigurationError("No traits to report")

    folder = os.path.dirname(os.path.abspath(filepath))
    used = set()
    tmp = None
    try:
        os.makedirs(folder, exist_ok=True)
        fd, tmp = tempfile.mkstemp(suffix=".xlsx", prefix=".zw_", dir=folder)
        os.close(fd)
        with pd.ExcelWriter(tmp, engine="openpyxl") as writer:
            for trait in trait_ids:
                sn = _sheet_name(trait, used)
                _write_trait_sheet(writer, sn, results, trait, breed_order, names)
        # mkstemp files are 0600; keep the old report's mode or the umask default
        os.chmod(tmp, _report_mode(filepath))
        os.replace(tmp, filepath)
    except Exception as e:
        if tmp is not None and os.path.exists(tmp):
            os.remove(tmp)
        raise DestinationWriteError(filepath, e) from e

    print(f"✅  Excel → {filepath}  ({len(trait_ids)} sheets)")


def _report_mode(filepath: str) -> int:
    if os.path.exists(filepath):
        return stat.S_IMODE(os.stat(filepath).st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_trait_sheet(writer, sn, results, trait, breed_order, names):
    heading = names.lookup(trait) if names is not None else trait
    pd.DataFrame([[heading]]).to_excel(
        writer, sheet_name=sn, startrow=HEADING_ROW, index=False, header=False)

    blocks = []
    for breed, row in block_layout(results, trait, breed_order):
        table = results[breed][trait]
        pd.DataFrame([[breed]]).to_excel(
            writer, sheet_name=sn, startrow=row, index=False, header=False)
        table.to_excel(writer, sheet_name=sn, startrow=row + 1, index=False)
        blocks.append((row, len(table.columns)))

    _format_sheet(writer.sheets[sn], blocks)


def _format_sheet(ws, blocks):
    HEADER_FILL = PatternFill("solid", fgColor="1F4E79")
    BORDER = Border(bottom=Side(style="thin", color="BFBFBF"),
                    right=Side(style="thin",  color="BFBFBF"))

    ws.cell(row=HEADING_ROW + 1, column=1).font = Font(bold=True, size=14)

    # openpyxl rows are 1-based
    for label_row, n_cols in blocks:
        ws.cell(row=label_row + 1, column=1).font = Font(bold=True, size=12, color="1F4E79")
        for ci in range(1, n_cols + 1):
            cell = ws.cell(row=label_row + 2, column=ci)
            cell.font      = Font(bold=True, color="FFFFFF", size=10)
            cell.fill      = HEADER_FILL
            cell.alignment = Alignment(horizontal="center", wrap_text=True)
            cell.border    = BORDER

    # heading may be long; don't size column A from it
    for col in ws.iter_cols(min_row=FIRST_LABEL_ROW + 1):
        if not col:
            continue
        ml = max((len(str(c.value)) if c.value is not None else 0) for c in col)
        ws.column_dimensions[get_column_letter(col[0].column)].width = min(max(ml + 2, 8), 32)
