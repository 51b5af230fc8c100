# kcheck/eligibility.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

import pandas as pd

from .file_keys import (
    BRANCH_CONSTANT, COL_BIRTH, COL_CARD_NO, COL_COURSE, COL_INSURER_NO, COL_SYMBOL,
    COL_VISIT, ELIGIBILITY_COLUMNS, WIDTH_CARD_NO, WIDTH_INSURER_NO, WIDTH_SYMBOL,
)
from .naming import ColumnIndex
from .normalize import era_to_gregorian, map_course_code, reformat_date, zero_pad
from .rules.course import evaluate_course_exclusions


@dataclass(frozen=True)
class EligibilityRecord:
    """協会けんぽ資格確認用CSVの1行。"""
    insurer_no: str
    symbol: str
    card_no: str
    branch: str
    birth_date: str
    visit_date: str
    course: str

    def as_row(self) -> list[str]:
        return [
            self.insurer_no, self.symbol, self.card_no, self.branch,
            self.birth_date, self.visit_date, self.course,
        ]


def build_eligibility_df(
    src_df: pd.DataFrame,
    columns: ColumnIndex,
    overflow: str = "truncate",
) -> pd.DataFrame:
    """
    予約台帳（単一ファイル）から資格確認用の7項目を作る。

    Parameters
    ----------
    src_df : 見出しを列名にした入力 DataFrame
    columns : require_columns で解決済みの列位置
    overflow : 0埋め桁数を超えた値の扱い（normalize.zero_pad 参照）

    Returns
    -------
    pd.DataFrame : ELIGIBILITY_COLUMNS 順。コース対象外の行は含まない。
    """
    remains, _excluded = evaluate_course_exclusions(src_df, columns)

    def get(name: str) -> pd.Series:
        return remains.iloc[:, columns[name]]

    out = pd.DataFrame(index=remains.index)
    out["保険者番号"] = get(COL_INSURER_NO).map(lambda x: zero_pad(x, WIDTH_INSURER_NO, overflow))
    out["記号"] = get(COL_SYMBOL).map(lambda x: zero_pad(x, WIDTH_SYMBOL, overflow))
    out["番号"] = get(COL_CARD_NO).map(lambda x: zero_pad(x, WIDTH_CARD_NO, overflow))
    out["枝番"] = BRANCH_CONSTANT
    # 生年月日は和暦（H01/04/01）、受診日は西暦（2024/04/01）で来る
    out["生年月日"] = get(COL_BIRTH).map(era_to_gregorian)
    out["受診日"] = get(COL_VISIT).map(reformat_date)
    out["コース"] = get(COL_COURSE).map(map_course_code)

    return out.reindex(columns=ELIGIBILITY_COLUMNS).reset_index(drop=True).astype(str)


def iter_eligibility_records(df: pd.DataFrame) -> Iterator[EligibilityRecord]:
    for row in df.itertuples(index=False, name=None):
        yield EligibilityRecord(*row)
