"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

LEDGER_HEADER = [
    "所属名１", "受診者名", "性別", "保険者番号", "健康保険記号", "健康保険番号",
    "生年月日", "受診日", "ｺｰｽ区分ｺｰﾄﾞ",
]

LEDGER_ROWS = [
    ["総務部", "山田　太郎", "男", "1130012", "12", "345", "H01/04/01", "2024/04/01", "19"],
    ["営業部", "佐藤　花子", "女", "01130012", "00000034", "0000567", "S64/01/07", "2024/04/02", "21"],
    ["経理部", "鈴木　一郎", "男", "1130012", "56", "789", "S40/05/05", "2024/04/03", "22"],
]

INSURER_HEADER = [
    "保険者番号（支部コード）", "被保険者証等記号", "被保険者証等番号", "枝番",
    "生年月日", "受診日", "健診種別", "資格確認結果",
]

INSURER_ROWS = [
    ["01130012", "00000012", "0000345", "00", "19890401", "20240401", "1", "有資格"],
    ["01130012", "99999999", "0000001", "00", "19700101", "20240405", "2", "資格なし"],
]


def make_table(header, rows) -> pd.DataFrame:
    """見出しと行から読み込み結果と同じ形（全セル str）の DataFrame を作る。"""
    cols = list(header)
    if not rows:
        return pd.DataFrame(columns=cols, dtype=object)
    return pd.DataFrame([list(r) for r in rows], columns=cols, dtype=object).astype(str)


def write_delimited(path: Path, rows, sep: str, trailing_sep: bool = False, encoding: str = "cp932") -> Path:
    """行を区切り文字で連結し、CRLF・指定文字コードで書き出す。"""
    lines = [sep.join(r) + (sep if trailing_sep else "") for r in rows]
    path.write_bytes(("\r\n".join(lines) + "\r\n").encode(encoding))
    return path


@pytest.fixture
def ledger_df():
    """Reservation ledger as a parsed table."""
    return make_table(LEDGER_HEADER, LEDGER_ROWS)


@pytest.fixture
def insurer_df():
    """Insurer result file as a parsed table."""
    return make_table(INSURER_HEADER, INSURER_ROWS)


@pytest.fixture
def ledger_file(tmp_path: Path) -> Path:
    """Tab-delimited cp932 ledger export; every line ends with a tab."""
    return write_delimited(tmp_path / "yoyaku.txt", [LEDGER_HEADER, *LEDGER_ROWS], "\t", trailing_sep=True)


@pytest.fixture
def insurer_file(tmp_path: Path) -> Path:
    """Comma-delimited cp932 insurer result file."""
    return write_delimited(tmp_path / "kekka.csv", [INSURER_HEADER, *INSURER_ROWS], ",")
