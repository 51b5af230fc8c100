# kcheck/export.py
from __future__ import annotations
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font

from .file_keys import (
    DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE, ELIGIBILITY_COLUMNS, OUTPUT_ENCODING, RESULT_PREFIX, RESULT_SHEET,
    SUBMISSION_PREFIX,
)

if TYPE_CHECKING:
    from .eligibility import EligibilityRecord


def submission_filename(today: date) -> str:
    # 例: SIKAKU_1311131242_0401.csv
    return f"{SUBMISSION_PREFIX}{today.strftime('%m%d')}.csv"


def result_filename(today: date) -> str:
    return f"{RESULT_PREFIX}{today.strftime('%Y%m%d')}.xlsx"


def to_csv(
    df: pd.DataFrame,
    path: str | Path,
    encoding: str = OUTPUT_ENCODING,
    lineterminator: str = "\r\n",
    encoding_errors: str = "replace",
) -> None:
    """
    資格確認用CSVの出力（見出しなし・カンマ区切り・CRLF）。
    Shift_JIS に無い文字は encoding_errors に従って置換する。
    """
    with open(path, "w", encoding=encoding, errors=encoding_errors, newline="") as f:
        df.to_csv(f, index=False, header=False, lineterminator=lineterminator)


def save_workbook(
    rows: Iterable[Sequence[str]],
    path: str | Path,
    sheet_name: str = RESULT_SHEET,
    font_name: str = DEFAULT_FONT_NAME,
    font_size: int = DEFAULT_FONT_SIZE,
) -> None:
    """1シートのExcelを保存する。全セルを文字列で書き、既定フォントを設定する。"""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    font = Font(name=font_name, size=font_size)

    for row in rows:
        ws.append(["" if v is None else str(v) for v in row])
        for cell in ws[ws.max_row]:
            cell.font = font
    wb.save(path)


def write_submission(
    records: Iterable[EligibilityRecord],
    path: str | Path,
    encoding: str = OUTPUT_ENCODING,
) -> int:
    """資格確認用レコードをCSVに書き、書いた件数を返す。"""
    rows = [r.as_row() for r in records]
    to_csv(pd.DataFrame(rows, columns=ELIGIBILITY_COLUMNS, dtype=object), path, encoding=encoding)
    return len(rows)
