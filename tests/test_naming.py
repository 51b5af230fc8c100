"""Tests for header-driven column resolution."""

import pytest

from kcheck.errors import MissingColumnsError
from kcheck.file_keys import ELIGIBILITY_REQUIRED, LEDGER_REQUIRED
from kcheck.naming import require_columns, resolve_columns
from tests.conftest import LEDGER_HEADER


class TestResolveColumns:
    def test_positions_follow_header(self):
        idx = resolve_columns(LEDGER_HEADER, ELIGIBILITY_REQUIRED)
        assert idx.is_complete
        assert idx["保険者番号"] == 3
        assert idx["ｺｰｽ区分ｺｰﾄﾞ"] == 8

    def test_any_column_order(self):
        """Resolution succeeds regardless of column order."""
        reordered = list(reversed(LEDGER_HEADER))
        idx = resolve_columns(reordered, ELIGIBILITY_REQUIRED)
        assert idx.is_complete
        assert idx["生年月日"] == reordered.index("生年月日")

    def test_missing_field_reported(self):
        header = [c for c in LEDGER_HEADER if c != "生年月日"]
        idx = resolve_columns(header, ELIGIBILITY_REQUIRED)
        assert not idx.is_complete
        assert idx.missing == ("生年月日",)
        assert idx.get("生年月日") is None

    def test_missing_fields_in_required_order(self):
        idx = resolve_columns(["所属名１"], LEDGER_REQUIRED)
        assert idx.missing == ("受診者名", "性別", "健康保険記号", "健康保険番号")

    def test_first_duplicate_wins(self):
        idx = resolve_columns(["性別", "性別"], ["性別"])
        assert idx["性別"] == 0

    def test_exact_match_only(self):
        idx = resolve_columns(["生年月日 ", "受診日(西暦)"], ["生年月日", "受診日"])
        assert idx.missing == ("生年月日", "受診日")

    def test_index_is_read_only(self):
        idx = resolve_columns(LEDGER_HEADER, LEDGER_REQUIRED)
        with pytest.raises(TypeError):
            idx.positions["性別"] = 0


class TestRequireColumns:
    def test_raises_with_missing_list(self):
        with pytest.raises(MissingColumnsError) as exc:
            require_columns(["保険者番号"], ELIGIBILITY_REQUIRED)
        assert "健康保険記号" in exc.value.missing
        assert "保険者番号" not in exc.value.missing
