# kcheck/compose.py
from __future__ import annotations
from typing import List

import pandas as pd

from .file_keys import INSURER_POS_COURSE, INSURER_POS_DATES, LEDGER_OUTPUT
from .normalize import format_display_date, map_course_label


def _render_cell(pos: int, value: str) -> str:
    if pos in INSURER_POS_DATES:
        return format_display_date(value)
    if pos == INSURER_POS_COURSE:
        return map_course_label(value)
    return value


def compose_result_rows(insurer: pd.DataFrame, ledger_fields: pd.DataFrame) -> List[List[str]]:
    """
    Excel出力用の行を組み立てる。
      見出し: 所属名１, 受診者名, 性別 + 協会けんぽ結果の見出し（そのまま）
      明細  : 台帳の3項目 + 協会けんぽ結果の各列
              （4,5列目は YYYY/MM/DD、6列目はコース名に置換）
    ledger_fields は join_ledger_fields の戻り値（insurer と同じ行数・順序）。
    """
    rows: List[List[str]] = [list(LEDGER_OUTPUT) + [str(c) for c in insurer.columns]]

    ledger_rows = ledger_fields.reindex(columns=LEDGER_OUTPUT).fillna("")
    for lrow, irow in zip(
        ledger_rows.itertuples(index=False, name=None),
        insurer.itertuples(index=False, name=None),
    ):
        rendered = [_render_cell(pos, str(v)) for pos, v in enumerate(irow)]
        rows.append([str(v) for v in lrow] + rendered)
    return rows
