"""Tests for the joined result rows."""

from kcheck.compose import compose_result_rows
from kcheck.file_keys import LEDGER_REQUIRED
from kcheck.matching import join_ledger_fields
from kcheck.naming import resolve_columns
from tests.conftest import INSURER_HEADER


def test_compose_rows(insurer_df, ledger_df):
    ledger_fields = join_ledger_fields(insurer_df, ledger_df, resolve_columns(ledger_df.columns, LEDGER_REQUIRED))
    rows = compose_result_rows(insurer_df, ledger_fields)

    assert rows[0] == ["所属名１", "受診者名", "性別"] + INSURER_HEADER
    assert rows[1] == [
        "総務部", "山田　太郎", "男",
        "01130012", "00000012", "0000345", "00", "1989/04/01", "2024/04/01", "一般健診", "有資格",
    ]
    assert rows[2] == [
        "", "", "",
        "01130012", "99999999", "0000001", "00", "1970/01/01", "2024/04/05", "一般健診＋付加", "資格なし",
    ]
    assert len(rows) == len(insurer_df) + 1
