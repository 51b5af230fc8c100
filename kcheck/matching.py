# kcheck/matching.py
from __future__ import annotations
from typing import NamedTuple, Optional

import pandas as pd

from .file_keys import (
    COL_CARD_NO, COL_SYMBOL, INSURER_POS_CARD, INSURER_POS_SYMBOL, LEDGER_OUTPUT,
    WIDTH_CARD_NO, WIDTH_SYMBOL,
)
from .naming import ColumnIndex
from .normalize import zero_pad


class MatchKey(NamedTuple):
    """突合キー（健康保険記号8桁, 健康保険番号7桁）"""
    symbol: str
    card_no: str


def match_key(symbol, card_no, overflow: str = "truncate") -> MatchKey:
    return MatchKey(
        zero_pad(symbol, WIDTH_SYMBOL, overflow),
        zero_pad(card_no, WIDTH_CARD_NO, overflow),
    )


def _cell(row, pos: int) -> str:
    return row[pos] if pos < len(row) else ""


def find_ledger_row(
    ledger: pd.DataFrame,
    columns: ColumnIndex,
    key: MatchKey,
) -> Optional[pd.Series]:
    """
    予約台帳を先頭から走査し、キーが一致した最初の行を返す（無ければ None）。
    LedgerIndex と同じ結果になる素朴な実装。
    """
    sym_pos, card_pos = columns[COL_SYMBOL], columns[COL_CARD_NO]
    for i in range(len(ledger)):
        row = ledger.iloc[i]
        if match_key(row.iloc[sym_pos], row.iloc[card_pos]) == key:
            return row
    return None


class LedgerIndex:
    """
    予約台帳の突合キー → 出力項目（所属名１, 受診者名, 性別）の索引。
    同じキーが複数あれば先に出た行を採用する。
    """

    def __init__(self, ledger: pd.DataFrame, columns: ColumnIndex, overflow: str = "truncate"):
        self._overflow = overflow
        keys = pd.DataFrame({
            "__key_sym__": ledger.iloc[:, columns[COL_SYMBOL]].map(
                lambda x: zero_pad(x, WIDTH_SYMBOL, overflow)),
            "__key_card__": ledger.iloc[:, columns[COL_CARD_NO]].map(
                lambda x: zero_pad(x, WIDTH_CARD_NO, overflow)),
        }, index=ledger.index)
        for name in LEDGER_OUTPUT:
            keys[name] = ledger.iloc[:, columns[name]]

        first = keys.drop_duplicates(subset=["__key_sym__", "__key_card__"], keep="first")
        self._table: dict[MatchKey, tuple[str, ...]] = {
            MatchKey(sym, card): tuple(str(v) for v in rest)
            for sym, card, *rest in first.itertuples(index=False, name=None)
        }

    def __len__(self) -> int:
        return len(self._table)

    def lookup(self, key: MatchKey) -> tuple[str, ...]:
        return self._table.get(key, tuple("" for _ in LEDGER_OUTPUT))

    def join(self, insurer: pd.DataFrame) -> pd.DataFrame:
        """
        協会けんぽ結果の各行（記号=1列目, 番号=2列目）に台帳の出力項目を付ける。
        一致しない行は空欄。戻り値の行順・件数は insurer と同じ。
        """
        rows = [
            self.lookup(match_key(_cell(r, INSURER_POS_SYMBOL), _cell(r, INSURER_POS_CARD), self._overflow))
            for r in insurer.itertuples(index=False, name=None)
        ]
        return pd.DataFrame(rows, columns=LEDGER_OUTPUT, index=insurer.index, dtype=object)


def join_ledger_fields(
    insurer: pd.DataFrame,
    ledger: pd.DataFrame,
    columns: ColumnIndex,
    overflow: str = "truncate",
) -> pd.DataFrame:
    return LedgerIndex(ledger, columns, overflow).join(insurer)
