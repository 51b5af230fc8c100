"""
受診コースによる対象判定ルール。
- 協会けんぽの資格確認に出すのは ｺｰｽ区分ｺｰﾄﾞ 19/20/21 の受診者のみ。
- 対象外の行はエラーにもログにもせず、出力から外すだけ。
"""
# kcheck/rules/course.py
from __future__ import annotations
from typing import Tuple

import pandas as pd

from kcheck.file_keys import COL_COURSE
from kcheck.naming import ColumnIndex
from kcheck.normalize import map_course_code


def is_in_scope(course_code) -> bool:
    # コース変換表に載っているコードだけが対象（正規化も map_course_code と同じ）
    return map_course_code(course_code) != ""


def evaluate_course_exclusions(
    df: pd.DataFrame,
    columns: ColumnIndex,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    戻り値: (remains_df, excluded_df)
      - remains_df … 資格確認用CSVに出すレコード（元の並び順のまま）
      - excluded_df … コース対象外のレコード
    """
    pos = columns[COL_COURSE]
    mask = df.iloc[:, pos].map(is_in_scope).astype(bool)
    return df.loc[mask].copy(), df.loc[~mask].copy()
