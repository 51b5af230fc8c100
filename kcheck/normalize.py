# kcheck/normalize.py
from __future__ import annotations
import unicodedata

from .errors import FieldOverflowError
from .file_keys import COURSE_CODE_MAP, COURSE_LABELS

# 和暦の年 + オフセット = 西暦 - 1900
ERA_OFFSETS = {
    "M": -33,   # 明治
    "T": 11,    # 大正
    "S": 25,    # 昭和
    "H": 88,    # 平成
    "R": 118,   # 令和
}

OVERFLOW_POLICIES = ("truncate", "error")


# ========= 正規化ユーティリティ =========
def _clean(raw) -> str:
    # 全角数字・英字を半角へ（NFKC）、前後空白を除去
    if raw is None:
        return ""
    return unicodedata.normalize("NFKC", str(raw)).strip()


def zero_pad(raw, width: int, overflow: str = "truncate") -> str:
    """
    値を width 桁の0埋め文字列にする（右寄せ）。
    空欄は全桁 0 になる。width を超える値は overflow に従う:
      - "truncate": 右側 width 桁を残す
      - "error"   : FieldOverflowError
    """
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"unknown overflow policy: {overflow}")
    s = _clean(raw)
    if len(s) > width:
        if overflow == "error":
            raise FieldOverflowError(s, width)
        return s[-width:]
    return s.rjust(width, "0")


def era_to_gregorian(raw) -> str:
    """
    和暦 'H01/04/01'（元号1文字 + 年2桁 + 区切り + 月2桁 + 区切り + 日2桁）を YYYYMMDD に。
    未知の元号は年を空のまま（MMDD のみ）返す。形式が崩れている場合は空欄。
    （旧ツールは未知の元号でも和暦の年をそのまま前に付けていた: X05/01/01 → 50101）
    """
    s = _clean(raw)
    if len(s) < 9:
        return ""
    era = s[0:1].upper()
    year_part, month, day = s[1:3], s[4:6], s[7:9]
    if not year_part.isdigit():
        return ""

    offset = ERA_OFFSETS.get(era)
    if offset is None:
        return month + day
    return str(1900 + int(year_part) + offset) + month + day


def reformat_date(raw) -> str:
    """ 'YYYY/MM/DD'（区切りは4,7桁目）→ 'YYYYMMDD' """
    s = _clean(raw)
    return s[0:4] + s[5:7] + s[8:10]


def format_display_date(raw) -> str:
    """ 'YYYYMMDD' → 'YYYY/MM/DD'。8桁でなければそのまま返す。 """
    s = "" if raw is None else str(raw)
    if len(s) != 8:
        return s
    return f"{s[0:4]}/{s[4:6]}/{s[6:]}"


def map_course_code(raw) -> str:
    # 19/20/21 以外は空欄
    return COURSE_CODE_MAP.get(_clean(raw), "")


def map_course_label(code) -> str:
    return COURSE_LABELS.get(_clean(code), "")
